from boxline_plot.cli import main

raise SystemExit(main())
