"""Allow ``python -m fen2pdf``."""

import sys

from fen2pdf.app import main

sys.exit(main())
