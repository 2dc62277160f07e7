"""SENTIENCE: a scroll-driven presentation with a particle background."""
