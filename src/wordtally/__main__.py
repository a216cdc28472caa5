from __future__ import annotations

import sys

from wordtally.main import main

sys.exit(main())
