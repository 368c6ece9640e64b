"""Core types: geometry, identifiers, paint layers and ordering, and text ranges."""