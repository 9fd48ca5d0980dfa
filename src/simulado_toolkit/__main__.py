from simulado_toolkit.cli import main

raise SystemExit(main())
