from button_demo.main import main

raise SystemExit(main())
