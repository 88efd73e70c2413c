from aoc2025.cli import main

raise SystemExit(main())
