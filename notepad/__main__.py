from notepad.main import main

raise SystemExit(main())
