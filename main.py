"""mdgallery — index gallery embeds in a markdown vault and search them."""

import sys

from mdgallery.cli import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
