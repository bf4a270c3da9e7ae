from loxscan.cli import main

raise SystemExit(main())
