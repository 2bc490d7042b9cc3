import sys

from flexiql.cli import main

sys.exit(main())
