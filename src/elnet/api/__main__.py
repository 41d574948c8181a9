"""Allow running with: python -m elnet.api"""
from elnet.api.api_server import main

raise SystemExit(main())
