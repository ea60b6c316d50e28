from wolfden.play import main

raise SystemExit(main())
