import sys

from .lisp2c import main

sys.exit(main())
