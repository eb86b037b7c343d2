from documark.documark_cli import main

raise SystemExit(main())
