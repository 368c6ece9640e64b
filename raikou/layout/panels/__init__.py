"""Panels that measure and arrange child layout elements."""