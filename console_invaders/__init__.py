# Console Invaders Source Package
"""
Console Invaders - Character-grid arcade shooter.

Modules:
- core: Abstract interfaces for games, input sources, and render sinks
- invaders: Simulation core (world grid, shields, formation, projectiles,
  collision, frame stepper) plus the session shell and sinks
- visualization: Rich-based terminal display
- utils: Configuration and logging setup
"""

__version__ = "1.0.0"
