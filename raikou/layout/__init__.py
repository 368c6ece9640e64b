"""Layout system: layoutable state, measure/arrange passes, the layout manager and paint commands."""