"""Print a bearer token for a principal.

Usage:
    python create_token.py <principal> [days]
"""
import sys

from saloon_api.app.core.security import create_access_token

if len(sys.argv) < 2:
    sys.exit("usage: python create_token.py <principal> [days]")
principal = sys.argv[1]
days = int(sys.argv[2]) if len(sys.argv) > 2 else 365
print(create_access_token({"sub": principal}, expires_delta=days * 24 * 60 * 60))
