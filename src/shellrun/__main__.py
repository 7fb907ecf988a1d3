from shellrun.cli import main

raise SystemExit(main())
