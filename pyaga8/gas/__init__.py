from .gas import (gas_eos, gas_mw, gas_density, gas_z, gas_pressure, gas_props, gas_props_table, aga8_2017,
                  gerg_2008)
