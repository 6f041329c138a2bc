from .classes import eos_method, expansion_order, solver_state, class_dic
