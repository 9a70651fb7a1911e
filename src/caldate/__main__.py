from caldate.cli import main

raise SystemExit(main())
