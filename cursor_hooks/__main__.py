import sys

from cursor_hooks.cli import main


sys.exit(main())
