from cycles_bot.cli import main

raise SystemExit(main())
