from loosever.main import main

raise SystemExit(main())
