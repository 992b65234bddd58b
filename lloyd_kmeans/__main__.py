from lloyd_kmeans.main import main

raise SystemExit(main())
