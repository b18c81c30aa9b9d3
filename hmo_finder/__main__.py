from hmo_finder.cli import main

raise SystemExit(main())
