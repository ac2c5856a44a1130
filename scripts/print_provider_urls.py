#!/usr/bin/env python3
"""CLI helper: print resolved provider endpoints and default models
(endpoint preference > env <PROVIDER>_URL > default).

Usage: python scripts/print_provider_urls.py [provider...]
"""
import sys

from utils.provider_resolver import DEFAULTS, resolve_model, resolve_provider_url


def main(argv):
    providers = argv[1:] or list(DEFAULTS)
    for p in providers:
        if p not in DEFAULTS:
            print(f"{p}: unsupported provider", file=sys.stderr)
            return 2
        print(f"{p}: {resolve_provider_url(p)} (model: {resolve_model(p, {})})")
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
