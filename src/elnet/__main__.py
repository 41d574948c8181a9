"""Allow running with: python -m elnet N Rc K Lx Ly Lz file [DIM]"""
from elnet.cli import main

raise SystemExit(main())
