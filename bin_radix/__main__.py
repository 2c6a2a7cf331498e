from bin_radix.cli import main

raise SystemExit(main())
