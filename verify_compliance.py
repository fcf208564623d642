#!/usr/bin/env python3
"""Verify calculator-service API endpoints match the locked OpenAPI contract.

Compares the routes registered on the FastAPI app against
reference/openapi.locked.yaml.
"""

import sys
from pathlib import Path
from typing import Dict, List

import yaml

HTTP_METHODS = ['get', 'post', 'put', 'delete', 'patch']
DEFAULT_OPENAPI_FILE = Path(__file__).parent / 'reference' / 'openapi.locked.yaml'


def extract_spec_endpoints(openapi_file):
    """Extract all endpoints from OpenAPI spec."""
    with open(openapi_file) as f:
        spec = yaml.safe_load(f)

    endpoints = {}
    for path, methods in (spec.get('paths') or {}).items():
        for method in methods.keys():
            if method in HTTP_METHODS:
                key = f"{method.upper()} {path}"
                endpoints[key] = {
                    'path': path,
                    'method': method.upper(),
                    'operation_id': methods[method].get('operationId', ''),
                    'summary': methods[method].get('summary', ''),
                    'tags': methods[method].get('tags', []),
                }

    return endpoints


def extract_implemented_endpoints(app):
    """Extract all endpoints a FastAPI app publishes in its OpenAPI schema."""
    endpoints = {}
    for path, methods in app.openapi().get('paths', {}).items():
        for method, details in methods.items():
            if method not in HTTP_METHODS:
                continue
            key = f"{method.upper()} {path}"
            endpoints[key] = {
                'path': path,
                'method': method.upper(),
                'name': details.get('operationId', ''),
            }

    return endpoints


def compare_endpoints(spec_endpoints: Dict, impl_endpoints: Dict) -> Dict[str, List[str]]:
    """Split endpoints into implemented, missing and extra."""
    return {
        'implemented': sorted(k for k in spec_endpoints if k in impl_endpoints),
        'missing': sorted(k for k in spec_endpoints if k not in impl_endpoints),
        'extra': sorted(k for k in impl_endpoints if k not in spec_endpoints),
    }


def main(openapi_file=DEFAULT_OPENAPI_FILE, app=None):
    if app is None:
        from calculator_service.main import app

    print("=" * 80)
    print("Calculator Service API Endpoint Compliance Check")
    print("=" * 80)
    print()

    print("📋 Extracting OpenAPI specification...")
    spec_endpoints = extract_spec_endpoints(openapi_file)
    print(f"   Found {len(spec_endpoints)} endpoints in spec")

    print("\n🔍 Scanning application routes...")
    impl_endpoints = extract_implemented_endpoints(app)
    print(f"   Found {len(impl_endpoints)} endpoints implemented")

    result = compare_endpoints(spec_endpoints, impl_endpoints)
    implemented, missing, extra = result['implemented'], result['missing'], result['extra']

    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)
    total = len(spec_endpoints)
    coverage = len(implemented) * 100 // total if total else 100
    print(f"✅ Implemented: {len(implemented)} / {total} ({coverage}%)")
    print(f"❌ Missing: {len(missing)} endpoints")
    print(f"➕ Extra (not in spec): {len(extra)} endpoints")

    if missing:
        print(f"\n❌ MISSING ENDPOINTS ({len(missing)}):")
        for endpoint in missing:
            info = spec_endpoints[endpoint]
            print(f"   {endpoint}")
            print(f"      Summary: {info['summary']}")
            print(f"      Tags: {', '.join(info['tags'])}")

    if extra:
        print(f"\n➕ EXTRA ENDPOINTS (not in spec, {len(extra)}):")
        for endpoint in extra:
            print(f"   {endpoint}")
            print(f"      Handler: {impl_endpoints[endpoint]['name']}")

    print("\n" + "=" * 80)

    if missing:
        print("❌ COMPLIANCE CHECK FAILED - Missing endpoints from spec")
        return 1
    else:
        print("✅ COMPLIANCE CHECK PASSED - All spec endpoints implemented")
        return 0


if __name__ == '__main__':
    sys.exit(main())
