"""
This package contains the core domain models and logic of the Video Grid application.

The domain layer holds the pure computations of the program and is independent
of the CLI, the services that run external tools, and the filesystem.

Modules:
    exceptions.py: Defines the exception types raised by each stage (probe,
                   plan, filter graph, encode).
    media.py: Contains `VideoInput` and the parsers for ffprobe's frame rate
              and duration output.
    plan.py: Contains `GridPlan` and `plan()`, which derive the effective
             frame rate, duration and cell size.
    filter_graph.py: Contains `FilterSegment`, `FilterGraph` and
                     `build_filter_graph()`, which produce the label-checked
                     `-filter_complex` expression.
"""
