"""Allow running the command-line tool with ``python -m xml_tree_converter``."""

import sys

from xml_tree_converter.cli import main

sys.exit(main())
