import sys

from stream_splitter.cli import main

sys.exit(main())
