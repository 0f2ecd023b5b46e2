from typesplit.cli import main

raise SystemExit(main())
