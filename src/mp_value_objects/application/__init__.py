"""Application – use-case level helpers built on the kernel."""
