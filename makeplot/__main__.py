from makeplot.cli import main

raise SystemExit(main())
