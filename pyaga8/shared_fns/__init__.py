from .shared_fns import convert_to_numpy, process_output, check_2_inputs, parse_temperature, parse_pressure
