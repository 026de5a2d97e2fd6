from ask.main import main

raise SystemExit(main())
