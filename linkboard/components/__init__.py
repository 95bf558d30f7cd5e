"""Components of the link synchronization engine, leaf-first."""
