"""Calculator service: health check and two-operand sum/product API."""
