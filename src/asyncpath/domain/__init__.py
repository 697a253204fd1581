"""Domain layer - value types, protocols and exceptions with zero external dependencies.

This layer contains:
- types: CursorContext, CandidateEntry, PreviewResult and friends
- protocols: the filesystem capability consumed by the scanner and previewer
- exceptions: errors raised by the background workers

The domain layer has NO dependencies on application, infrastructure, or presentation layers.
"""
