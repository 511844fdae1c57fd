"""Push_swap stack-sorting solver, FdF wireframe height-map viewer and Mandelbrot explorer."""

__version__ = "0.1.0"