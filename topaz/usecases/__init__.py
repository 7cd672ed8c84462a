"""Use-case layer behind the command surface.

Each module wraps exactly one port call and translates its failure into a
user-presentable ``UseCaseError`` without performing I/O directly.
"""
