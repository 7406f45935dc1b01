from clinicsys.app.main import main

raise SystemExit(main())
