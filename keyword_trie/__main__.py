import sys

from keyword_trie.cli.cli import main

sys.exit(main())
