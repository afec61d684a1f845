"""Allow ``python -m appcred_audit``."""

from .main import main

main()
