"""
Core data structures and state management for Transformation Marker.

Modules:
- constants: Timeline length, track/label vocabularies, time formatting
- timeline: Pixel <-> time mapping and ruler ticks
- models: Immutable Marker, MarkerStore, session AppState
- duration: Elapsed-duration calculator for pasted segment text
- tempo: Tap tempo estimator
- export: markers.csv serialization
- settings: JSON user settings
"""
