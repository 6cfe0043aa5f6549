from dumact.cli import main

raise SystemExit(main())
