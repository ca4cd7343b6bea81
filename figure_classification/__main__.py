from figure_classification.main import main

raise SystemExit(main())
