# Grid Snake Source Package
"""
Grid Snake - mechanics core of a grid-based snake game.

Modules:
- core: Abstract interfaces for renderers and input sources
- game: Session, rules, food placement, game loop and pygame front end
- utils: Configuration and logging
"""
