from sortbench.cli import main

raise SystemExit(main())
