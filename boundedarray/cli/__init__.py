# CLI package for BoundedArray
"""
Demonstration CLI for BoundedArray.

Commands:
    boundedarray demo     — Run the demonstration sequence
    boundedarray render   — Build an array and print its rendering
"""
