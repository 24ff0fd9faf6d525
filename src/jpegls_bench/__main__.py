import sys

from jpegls_bench.cli import main

sys.exit(main())
