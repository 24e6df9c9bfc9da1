from fnswarm.utils.quantities import parse_memory_size, parse_cpu_quantity
