from engine_modules.main import main

raise SystemExit(main())
