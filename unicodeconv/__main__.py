from unicodeconv.app.main import main

raise SystemExit(main())
