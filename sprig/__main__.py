import sys

from sprig.repl import main

sys.exit(main())
