#!/usr/bin/env python3
"""
Examples of using gridroute.

Run this file to generate example diagrams as SVG and PNG files.
"""

from gridroute import GridDiagram


def example_simple_row():
    """Three steps in a row, with one skip connector"""
    print("Example 1: Simple Row")

    input_text = """
    FETCH: 0, 0
    PARSE: 1, 0
    STORE: 2, 0
    FETCH -> PARSE
    PARSE -> STORE
    FETCH -> STORE
    """

    diagram = GridDiagram(margin_x=20, margin_y=40)
    diagram.save(input_text, "example_row.svg")
    print("  Saved: example_row.svg\n")


def example_data_pipeline():
    """ETL data pipeline laid out in a column"""
    print("Example 2: Data Pipeline")

    input_text = """
    EXTRACT: 0, 0
    TRANSFORM: 0, 1
    VALIDATE: 0, 2
    LOAD: 0, 3
    ERROR: 2, 2
    EXTRACT -> TRANSFORM
    TRANSFORM -> VALIDATE
    VALIDATE -> LOAD
    EXTRACT -> LOAD [#336699]
    VALIDATE -> ERROR [#cc0000]
    """

    diagram = GridDiagram(margin_x=20, margin_y=20, show_grid=True)
    diagram.save(input_text, "example_pipeline.svg")
    diagram.save_png(input_text, "example_pipeline.png", scale=2)
    print("  Saved: example_pipeline.svg, example_pipeline.png\n")


def example_retry_loop():
    """Request handling with a retry path back up the grid"""
    print("Example 3: Retry Loop")

    input_text = """
    REQUEST: 0, 0
    HANDLE: 1, 0
    RETRY: 1, 1
    RESPOND: 3, 0
    LOG: 3, 2
    REQUEST -> HANDLE
    HANDLE -> RETRY
    RETRY -> REQUEST
    HANDLE -> RESPOND
    LOG -> REQUEST
    """

    diagram = GridDiagram(margin_x=20, margin_y=20)
    diagram.save(input_text, "example_retry.svg")
    diagram.layout(input_text, debug=True)
    print(diagram.get_trace().summary())
    print("  Saved: example_retry.svg\n")


def main():
    """Run all examples."""
    print("=" * 50)
    print("gridroute Examples")
    print("=" * 50)
    print()

    example_simple_row()
    example_data_pipeline()
    example_retry_loop()

    print("=" * 50)
    print("All examples generated!")
    print("=" * 50)


if __name__ == "__main__":
    main()
