"""
Coefficient tables of the GERG-2008 equation of state (Kunz & Wagner, J. Chem. Eng. Data 57,
3032-3091, 2012; AGA8 Part 2, 2017).

Component order follows pyaga8.constants.COMPONENTS. Pure fluid terms are stored with their
exp(-delta^c) power c, c == 0 marking a polynomial term. Binary reducing parameters are
listed for pairs i < j, oriented as published (beta_ij applies to x_i); pairs not listed use 1.0.
All arrays are read-only.
"""

import numpy as np

from pyaga8.constants import NC

def _frozen(values):
    arr = np.array(values, dtype=float)
    arr.flags.writeable = False
    return arr

# Molar masses (g/mol)
MMI_GERG = _frozen([
    16.04246, 28.0134, 44.0095, 30.06904, 44.09562, 58.1222, 58.1222, 72.14878, 72.14878,
    86.17536, 100.20194, 114.22852, 128.2551, 142.28168, 2.01588, 31.9988, 28.0101, 18.01528,
    34.08088, 4.002602, 39.948,
])

# Critical temperatures (K)
TC = _frozen([
    190.564, 126.192, 304.1282, 305.322, 369.825, 407.817, 425.125, 460.35, 469.7, 507.82,
    540.13, 569.32, 594.55, 617.7, 33.19, 154.595, 132.86, 647.096, 373.1, 5.1953, 150.687,
])

# Critical densities (mol/L)
DC = _frozen([
    10.139342719, 11.1839, 10.624978698, 6.870854540, 5.000043088, 3.860142940, 3.920016792,
    3.271, 3.215577588, 2.705877875, 2.315324434, 2.056404127, 1.81, 1.64, 14.94, 13.63, 10.85,
    17.87371609, 10.19, 17.399, 13.407429659,
])

# =============================================================================
# Pure fluid equations
# =============================================================================
# Exponents of the 24 term equations of methane, nitrogen and ethane
_D24 = (1, 1, 2, 2, 4, 4, 1, 1, 1, 2, 3, 6, 2, 3, 3, 4, 4, 2, 3, 4, 5, 6, 6, 7)
_T24 = (0.125, 1.125, 0.375, 1.125, 0.625, 1.5, 0.625, 2.625, 2.75, 2.125, 2.0, 1.75, 4.5, 4.75,
        5.0, 4.0, 4.5, 7.5, 14.0, 11.5, 26.0, 28.0, 30.0, 16.0)
_C24 = (0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 3, 6, 6, 6, 6)

# Exponents of the short 12 term (Span-Wagner) form
_D12 = (1, 1, 1, 2, 3, 7, 2, 5, 1, 4, 3, 4)
_T12 = (0.25, 1.125, 1.5, 1.375, 0.25, 0.875, 0.625, 1.75, 3.625, 3.625, 14.5, 12.0)
_C12 = (0, 0, 0, 0, 0, 0, 1, 1, 2, 2, 3, 3)

# Per component: (n, d, t, c)
PURE = (
    # Methane
    ((0.57335704239162, -1.6760687523730, 0.23405291834916, -0.21947376343441, 0.016369201404128,
      0.015004406389280, 0.098990489492918, 0.58382770929055, -0.74786867560390, 0.30033302857974,
      0.20985543806568, -0.018590151133061, -0.15782558339049, 0.12716735220791, -0.032019743894346,
      -0.068049729364536, 0.024291412853736, 0.0051440451639444, -0.019084949733532,
      0.0055229677241291, -0.0044197392976085, 0.040061416708429, -0.033752085907575,
      -0.0025127658213357), _D24, _T24, _C24),
    # Nitrogen
    ((0.59889711801201, -1.6941557480731, 0.24579736191718, -0.23722456755175, 0.017954918715141,
      0.014592875720215, 0.10008065936206, 0.73157115385532, -0.88372272336366, 0.31887660246708,
      0.20766491728799, -0.019379315454158, -0.16936641554983, 0.13546846041701, -0.033066712095307,
      -0.060690817018557, 0.012797548292871, 0.0058743664107299, -0.018451951971969,
      0.0047226622042472, -0.0052024079680599, 0.043563505956635, -0.036251690750939,
      -0.0028974026866543), _D24, _T24, _C24),
    # Carbon dioxide
    ((0.52646564804653, -1.4995725042592, 0.27329786733782, 0.12949500022786, 0.15404088341841,
      -0.58186950946814, -0.18022494838296, -0.095389904072812, -0.0080486819317679,
      -0.035547751273090, -0.28079014882405, -0.082435890081677, 0.010832427979006,
      -0.0067073993161097, -0.0046827907600524, -0.028359911832177, 0.019500174744098,
      -0.21609137507166, 0.43772794926972, -0.22130790113593, 0.015190189957331,
      -0.015380948953300),
     (1, 1, 2, 3, 3, 3, 4, 5, 6, 6, 1, 4, 1, 1, 3, 3, 4, 5, 5, 5, 5, 5),
     (0.0, 1.25, 1.625, 0.375, 0.375, 1.375, 1.125, 1.375, 0.125, 1.625, 3.75, 3.5, 7.5, 8.0, 6.0,
      16.0, 11.0, 24.0, 26.0, 28.0, 24.0, 26.0),
     (0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 2, 2, 3, 3, 3, 3, 3, 5, 5, 5, 6, 6)),
    # Ethane
    ((0.63596780450714, -1.7377981785459, 0.28914060926272, -0.33714276845694, 0.022405964699561,
      0.015715424886913, 0.11450634253745, 1.0612049379745, -1.2855224439423, 0.39414630777652,
      0.31390924682041, -0.021592277117247, -0.21723666564905, -0.28999574439489, 0.42321173025732,
      0.046434100259260, -0.13138398329741, 0.011492850364368, -0.033387688429909,
      0.015183171583644, -0.0047610805647657, 0.046917166277885, -0.039401755804649,
      -0.0032569956247611), _D24, _T24, _C24),
    # Propane
    ((1.0403973107358, -2.8318404081403, 0.84393809606294, -0.076559591850023, 0.094697373057280,
      0.00024796475497006, 0.27743760422870, -0.043846000648377, -0.26991064784350,
      -0.069313413089860, -0.029632145981653, 0.014040126751380), _D12, _T12, _C12),
    # Isobutane
    ((1.0429331589100, -2.8184272548892, 0.86176232397850, -0.10613619452487, 0.098615749302134,
      0.00023948208682322, 0.30330004856950, -0.041598156135099, -0.29991937470058,
      -0.080369342764109, -0.029761373251151, 0.013059630303140), _D12, _T12, _C12),
    # n-Butane
    ((1.0626277411455, -2.8620951828350, 0.88738233403777, -0.12570581155345, 0.10286308708106,
      0.00025358040602654, 0.32325200233982, -0.037950761057893, -0.32534802014452,
      -0.079050969051011, -0.020636720547775, 0.0057053809334750), _D12, _T12, _C12),
    # Isopentane
    ((1.0963, -3.0402, 1.0317, -0.1541, 0.11535, 0.00029809, 0.39571, -0.045881, -0.35804, -0.10107,
      -0.035484, 0.018156), _D12, _T12, _C12),
    # n-Pentane
    ((1.0968643098001, -2.9988888298061, 0.99516886799212, -0.16170708558539, 0.11334460072775,
      0.00026760595150748, 0.40979881986931, -0.040876423083075, -0.38169482469447,
      -0.10931956843993, -0.032073223327990, 0.016877016216975), _D12, _T12, _C12),
    # Hexane
    ((1.0553238013661, -2.6120615890629, 0.76613882967260, -0.29770320622459, 0.11879907733358,
      0.00027922861062617, 0.46347589844105, 0.011433196980297, -0.48256968738131,
      -0.093750558924659, -0.0067273247155994, -0.0051141583585428), _D12, _T12, _C12),
    # Heptane
    ((1.0543747645262, -2.6500681506144, 0.81730047827543, -0.30451391253428, 0.12253868710800,
      0.00027266472743928, 0.49865825681670, -0.00071432815084176, -0.54236895525450,
      -0.13801821610756, -0.0061595287380011, 0.00048602510393022), _D12, _T12, _C12),
    # Octane
    ((1.0722544875633, -2.4632951172003, 0.65386674054928, -0.36324974085628, 0.12713269626764,
      0.00030713572777930, 0.52656856987540, 0.019362862857653, -0.58939426849155,
      -0.14069963991934, -0.0078966330500036, 0.0033036597968109), _D12, _T12, _C12),
    # Nonane
    ((1.1151, -2.702, 0.83416, -0.38828, 0.1376, 0.00028185, 0.62037, 0.015847, -0.61726, -0.15043,
      -0.012982, 0.0044325), _D12, _T12, _C12),
    # Decane
    ((1.0461, -2.4807, 0.74372, -0.52579, 0.15315, 0.00032865, 0.84178, 0.055424, -0.73555,
      -0.18507, -0.020775, 0.012335), _D12, _T12, _C12),
    # Hydrogen
    ((5.3579928451252, -6.2050252530595, 0.13830241327086, -0.071397954896129, 0.015474053959733,
      -0.14976806405771, -0.026368723988451, 0.056681303156066, -0.060063958030436,
      -0.45043942027132, 0.42478840244500, -0.021997640827139, -0.010499521374530,
      -0.0028955902866816),
     (1, 1, 2, 2, 4, 1, 5, 5, 5, 1, 1, 2, 5, 1),
     (0.5, 0.625, 0.375, 0.625, 1.125, 2.625, 0.0, 0.25, 1.375, 4.0, 4.25, 5.0, 8.0, 8.0),
     (0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 3, 3, 5)),
    # Oxygen
    ((0.88878286369701, -2.4879433312148, 0.59750190775886, 0.0096501817061881, 0.071970428712770,
      0.00022337443000195, 0.18558686391474, -0.038129368035760, -0.15352245383006,
      -0.026726814910919, -0.025675298677127, 0.0095714302123668), _D12, _T12, _C12),
    # Carbon monoxide
    ((0.90554, -2.4515, 0.53149, 0.024173, 0.072156, 0.00018818, 0.19405, -0.043268, -0.12778,
      -0.027896, -0.034154, 0.016329), _D12, _T12, _C12),
    # Water
    ((0.82728408749586, -1.8602220416584, -1.1199009613744, 0.15635753976056, 0.87375844859025,
      -0.36674403715731, 0.053987893432436, 1.0957690214499, 0.053213037828563, 0.013050533930825,
      -0.41079520434476, 0.14637443344120, -0.055726838623719, -0.011201774143800,
      -0.0066062758068099, 0.0046918522004538),
     (1, 1, 1, 2, 2, 3, 4, 1, 5, 5, 1, 2, 4, 4, 1, 1),
     (0.5, 1.25, 1.875, 0.125, 1.5, 1.0, 0.75, 1.5, 0.625, 2.625, 5.0, 4.0, 4.5, 3.0, 4.0, 6.0),
     (0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 2, 2, 2, 3, 5, 5)),
    # Hydrogen sulfide
    ((0.87641, -2.0367, 0.21634, -0.050199, 0.066994, 0.00019076, 0.20227, -0.0045348, -0.2223,
      -0.034714, -0.014885, 0.0074154), _D12, _T12, _C12),
    # Helium
    ((-0.45579024006737, 1.2516390754925, -1.5438231650621, 0.020467489707221, -0.34476212380781,
      -0.020858459512787, 0.016227414711778, -0.057471818200892, 0.019462416430715,
      -0.033295680123020, -0.010863577372367, -0.022173365245954),
     (1, 1, 1, 4, 1, 3, 5, 5, 5, 2, 1, 2),
     (0.0, 0.125, 0.75, 1.0, 0.75, 2.625, 0.125, 1.25, 2.0, 1.0, 4.5, 5.0),
     (0, 0, 0, 0, 1, 1, 1, 1, 1, 2, 3, 3)),
    # Argon
    ((0.85095714803969, -2.4003222943480, 0.54127841476466, 0.016919770692538, 0.068825965019035,
      0.00021428032815338, 0.17429895321992, -0.033654495604194, -0.13526799857691,
      -0.016387350791552, -0.024987666851475, 0.0088769204815709), _D12, _T12, _C12),
)

# =============================================================================
# Binary departure functions
# =============================================================================
# poly: (d, t, n), gauss: (d, t, n, eta, beta), eps = gamma = 0.5 throughout
DEPARTURE = {
    'CH4-N2': {
        'poly': ((1, 0.0, -0.0098038985517335), (4, 1.85, 0.00042487270143005)),
        'gauss': ((1, 7.85, -0.034800214576142, 1.0, 1.0), (2, 5.4, -0.13333813013896, 1.0, 1.0),
                  (2, 0.0, -0.011993694974627, 0.25, 2.5), (2, 0.75, 0.069243379775168, 0.0, 3.0),
                  (2, 2.8, -0.31022508148249, 0.0, 3.0), (2, 4.45, 0.24495491753226, 0.0, 3.0),
                  (3, 4.25, 0.22369816716981, 0.0, 3.0)),
    },
    'CH4-CO2': {
        'poly': ((1, 2.6, -0.10859387354942), (2, 1.95, 0.080228576727389), (3, 0.0, -0.0093303985115717)),
        'gauss': ((1, 3.95, 0.040989274005848, 1.0, 1.0), (2, 7.95, -0.24338019772494, 0.5, 2.0),
                  (3, 8.0, 0.23855347281124, 0.0, 3.0)),
    },
    'CH4-C2H6': {
        'poly': ((3, 0.65, -0.00080926050298746), (4, 1.55, -0.00075381925080059)),
        'gauss': ((1, 3.1, -0.041618768891219, 1.0, 1.0), (2, 5.9, -0.23452173681569, 1.0, 1.0),
                  (2, 7.05, 0.14003840584586, 1.0, 1.0), (2, 3.35, 0.063281744807738, 0.875, 1.25),
                  (2, 1.2, -0.034660425848809, 0.75, 1.5), (2, 5.8, -0.23918747334251, 0.5, 2.0),
                  (2, 2.7, 0.0019855255066891, 0.0, 3.0), (3, 0.45, 6.1777746171555, 0.0, 3.0),
                  (3, 0.55, -6.9575358271105, 0.0, 3.0), (3, 1.95, 1.0630185306388, 0.0, 3.0)),
    },
    'CH4-C3H8': {
        'poly': ((3, 1.85, 0.013746429958576), (3, 3.95, -0.0074425012129552), (4, 0.0, -0.0045516600213685),
                 (4, 1.85, -0.0054546603179885), (4, 3.85, 0.0023682016824471)),
        'gauss': ((1, 5.25, 0.18007763721438, 0.25, 0.75), (1, 3.85, -0.44773942932486, 0.25, 1.0),
                  (1, 0.2, 0.019327374888200, 0.0, 2.0), (2, 6.5, -0.30632197804624, 0.0, 3.0)),
    },
    'N2-CO2': {
        'poly': ((2, 1.85, 0.28661625028399), (3, 1.4, -0.10919833861247)),
        'gauss': ((1, 3.2, -1.1374032082270, 0.25, 0.75), (1, 2.5, 0.76580544237358, 0.25, 1.0),
                  (1, 8.0, 0.0042638000926819, 0.0, 2.0), (2, 3.75, 0.17673538204534, 0.0, 3.0)),
    },
    'N2-C2H6': {
        'poly': ((2, 0.0, -0.47376518126608), (2, 0.05, 0.48961193461001), (3, 0.0, -0.0057011062090535)),
        'gauss': ((1, 3.65, -0.19966820041320, 1.0, 1.0), (2, 4.9, -0.69411103101723, 1.0, 1.0),
                  (2, 4.45, 0.69226192739021, 0.875, 1.25)),
    },
    'CH4-H2': {
        'poly': ((1, 2.0, -0.25157134971934), (3, -1.0, -0.0062203841111983), (3, 1.75, 0.088850315184396),
                 (4, 1.4, -0.035592212573239)),
        'gauss': (),
    },
    'generalized': {
        'poly': ((1, 1.0, 2.5574776844118), (1, 1.55, -7.9846357136353), (1, 1.7, 4.7859131465806),
                 (2, 0.25, -0.73265392369587), (2, 1.35, 1.3805471345312), (3, 0.0, 0.28349603476365),
                 (3, 1.25, -0.49087385940425), (4, 0.0, -0.10291888921447), (4, 0.7, 0.11836314681968),
                 (4, 5.4, 0.000055527385721943)),
        'gauss': (),
    },
}

# Pairs with a departure function: (i, j) -> (function, F_ij)
DEPARTURE_PAIRS = {
    (0, 1): ('CH4-N2', 1.0),
    (0, 2): ('CH4-CO2', 1.0),
    (0, 3): ('CH4-C2H6', 1.0),
    (0, 4): ('CH4-C3H8', 1.0),
    (1, 2): ('N2-CO2', 1.0),
    (1, 3): ('N2-C2H6', 1.0),
    (0, 14): ('CH4-H2', 1.0),
    (0, 6): ('generalized', 1.0),
    (0, 5): ('generalized', 0.771035405688),
    (3, 4): ('generalized', 0.13042409522),
    (3, 6): ('generalized', 0.281570073085),
    (3, 5): ('generalized', 0.260632376098),
    (4, 6): ('generalized', 0.0312572600489),
    (4, 5): ('generalized', -0.0551609771024),
    (5, 6): ('generalized', -0.0551240293009),
}

# =============================================================================
# Binary reducing parameters: (i, j) -> (beta_v, gamma_v, beta_T, gamma_T)
# =============================================================================
BINARY_REDUCING = {
    (0, 1): (0.998721377, 1.013950311, 0.998098830, 0.979273013),
    (0, 2): (0.999518072, 1.002806594, 1.022624490, 0.975665369),
    (0, 3): (0.997547866, 1.006617867, 0.996336508, 1.049707697),
    (0, 4): (1.004827070, 1.038470657, 0.989680305, 1.098655531),
    (0, 5): (1.011240388, 1.054319053, 0.980315756, 1.161117729),
    (0, 6): (0.979105972, 1.045375122, 0.994174910, 1.171607691),
    (0, 7): (1.0, 1.343685343, 1.0, 1.188899743),
    (0, 8): (0.948330120, 1.124508039, 0.992127525, 1.249173968),
    (0, 9): (0.958015294, 1.052643846, 0.981844797, 1.330570181),
    (0, 10): (0.962050831, 1.156655935, 0.977431529, 1.379850328),
    (0, 11): (0.994740603, 1.116549372, 0.957473785, 1.449245409),
    (0, 12): (1.002852287, 1.141895355, 0.947716769, 1.528532478),
    (0, 13): (1.033086292, 1.146089637, 0.937777823, 1.568231489),
    (0, 14): (1.0, 1.018702573, 1.0, 1.352643115),
    (0, 15): (1.0, 1.0, 1.0, 0.95),
    (0, 16): (0.997340772, 1.006102927, 0.987411732, 0.987473033),
    (0, 17): (1.012783169, 1.585018334, 1.063333913, 0.775810513),
    (0, 18): (1.012599087, 1.040161207, 1.011090031, 0.961155729),
    (0, 19): (1.0, 0.881405683, 1.0, 3.159776855),
    (0, 20): (1.034630259, 1.014678542, 0.990954281, 0.989843388),
    (1, 2): (0.977794634, 1.047578256, 1.005894529, 1.107654104),
    (1, 3): (0.978880168, 1.042352891, 1.007671428, 1.098650964),
    (1, 4): (0.974424681, 1.081025408, 1.002677329, 1.201264026),
    (1, 5): (0.986415830, 1.100576129, 0.992868130, 1.284462634),
    (1, 6): (0.996082610, 1.146949309, 0.994515234, 1.304886838),
    (1, 7): (1.0, 1.154135439, 1.0, 1.381770770),
    (1, 8): (1.0, 1.078877166, 1.0, 1.419029041),
    (1, 9): (1.0, 1.195952177, 1.0, 1.472607971),
    (1, 10): (1.0, 1.404554090, 1.0, 1.520975334),
    (1, 11): (1.0, 1.186067025, 1.0, 1.733280051),
    (1, 12): (1.0, 1.100405929, 0.956379450, 1.749119996),
    (1, 13): (1.0, 1.0, 0.957934447, 1.822157123),
    (1, 14): (0.972532065, 0.970115357, 0.946134337, 1.175696583),
    (1, 15): (0.999521770, 0.997082328, 0.997190589, 0.995157044),
    (1, 16): (1.0, 1.008690943, 1.0, 0.993425388),
    (1, 17): (1.0, 1.094749685, 1.0, 0.968808467),
    (1, 18): (0.910394249, 1.256844157, 1.004692366, 0.960174200),
    (1, 19): (0.969501055, 0.932629867, 0.692868765, 1.471831580),
    (1, 20): (1.004166412, 1.002212182, 0.999069843, 0.990034831),
    (2, 3): (1.002525718, 1.032876701, 1.013871147, 0.900949530),
    (2, 4): (0.996898004, 1.047596298, 1.033620538, 0.908772477),
    (2, 5): (1.076551882, 1.081909003, 1.023339824, 0.929982936),
    (2, 6): (1.174760923, 1.222437324, 1.018171004, 0.911498231),
    (2, 7): (1.060793104, 1.116793198, 1.019180957, 0.961218039),
    (2, 8): (1.024311498, 1.068406078, 1.027000795, 0.979217302),
    (2, 9): (1.0, 0.851343711, 1.0, 1.038675574),
    (2, 10): (1.205469976, 1.164585914, 1.011806317, 1.046169823),
    (2, 11): (1.026169373, 1.104043935, 1.029690780, 1.074455386),
    (2, 12): (1.0, 0.973386152, 1.007688620, 1.140671202),
    (2, 13): (1.000151132, 1.183394668, 1.020028790, 1.145512213),
    (2, 14): (0.904142159, 1.152792550, 0.942320195, 1.782924792),
    (2, 15): (1.0, 1.0, 1.0, 1.0),
    (2, 16): (1.0, 1.0, 1.0, 1.0),
    (2, 17): (0.949055959, 1.542328793, 0.997372205, 0.775453996),
    (2, 18): (0.906630564, 1.024085837, 1.016034583, 0.926018880),
    (2, 19): (0.846647561, 0.864141549, 0.768377630, 3.207456948),
    (2, 20): (1.008392428, 1.029205465, 0.996512863, 1.050971635),
    (3, 4): (0.997607277, 1.003034720, 0.996199694, 1.014730190),
    (3, 5): (1.0, 1.006616886, 1.0, 1.033283811),
    (3, 6): (1.0, 1.006338737, 1.0, 1.023956300),
    (3, 7): (1.0, 1.045439935, 1.0, 1.021150247),
    (3, 8): (1.0, 1.002728262, 1.0, 1.068225702),
    (3, 9): (1.0, 1.169701102, 1.0, 1.092177796),
    (3, 10): (1.0, 1.057666085, 1.0, 1.134532014),
    (3, 11): (1.007469726, 1.071917985, 0.984068272, 1.168636194),
    (3, 12): (1.0, 1.143536720, 1.0, 1.056043030),
    (3, 13): (0.995676258, 1.098361281, 0.970918061, 1.237191558),
    (3, 14): (0.925367171, 1.106072040, 0.932969831, 1.902008495),
    (3, 16): (1.0, 1.201417898, 1.0, 1.069224728),
    (3, 18): (1.010817909, 1.030988277, 0.990197354, 0.902736660),
    (4, 5): (0.999243146, 1.001156119, 0.998012298, 1.005250774),
    (4, 6): (0.999795868, 1.003264179, 1.000310289, 1.007392782),
    (4, 7): (1.040459289, 0.999432118, 0.994364425, 1.003269500),
    (4, 8): (1.044919431, 0.996484021, 1.040092130, 1.0),
    (4, 14): (1.0, 1.074006110, 1.0, 2.308215191),
    (4, 18): (0.936811219, 1.010593999, 0.992573556, 0.905829247),
    (5, 6): (1.000880464, 1.000414440, 1.000077547, 1.001432824),
    (5, 7): (1.0, 1.002284353, 1.0, 1.001835788),
    (5, 8): (1.0, 1.002779804, 1.0, 1.002495889),
    (5, 14): (1.0, 1.147595688, 1.0, 1.895305393),
    (5, 18): (1.012994431, 0.988591117, 0.974550548, 0.937130844),
    (6, 7): (1.0, 1.002728434, 1.0, 1.000792201),
    (6, 8): (1.0, 1.01815965, 1.0, 1.00200),
    (6, 9): (1.0, 1.034995284, 1.0, 1.009157060),
    (6, 10): (1.0, 1.019174227, 1.0, 1.021283378),
    (6, 11): (1.0, 1.046905515, 1.0, 1.033180106),
    (6, 12): (1.0, 1.049219137, 1.0, 1.014096448),
    (6, 13): (0.976951968, 1.027845529, 0.993688386, 1.076466918),
    (6, 14): (1.0, 1.232939523, 1.0, 2.509259945),
    (6, 18): (0.908113163, 1.033366041, 0.985962886, 0.926156602),
    (7, 8): (1.0, 1.000024335, 1.0, 1.000050537),
    (7, 14): (1.0, 1.184340443, 1.0, 1.996386669),
    (8, 9): (1.0, 1.002480637, 1.0, 1.000761237),
    (8, 10): (1.0, 1.008972412, 1.0, 1.002441051),
    (8, 11): (1.0, 1.069223964, 1.0, 1.016422347),
    (8, 14): (1.0, 1.188334783, 1.0, 2.013859174),
    (8, 18): (0.984613203, 1.076539234, 0.962006651, 0.959065662),
    (9, 10): (1.0, 1.001508227, 1.0, 0.999762786),
    (9, 11): (1.0, 1.006268954, 1.0, 1.001633952),
    (9, 12): (1.0, 1.02076168, 1.0, 1.055369591),
    (9, 13): (1.001516371, 1.013511439, 0.99764101, 1.028939539),
    (9, 14): (1.0, 1.243461678, 1.0, 3.021197546),
    (9, 18): (0.754473958, 1.339283552, 0.985891113, 0.956075596),
    (10, 14): (1.0, 1.159131722, 1.0, 3.169143057),
    (10, 18): (0.828967164, 1.087956749, 0.988937417, 1.013453092),
    (11, 14): (1.0, 1.305249405, 1.0, 2.191555216),
    (12, 14): (1.0, 1.342647661, 1.0, 2.23435404),
    (13, 14): (1.695358382, 1.120233729, 1.064818089, 3.786003724),
    (14, 16): (1.0, 1.121416201, 1.0, 1.377504607),
    (15, 20): (0.999746847, 0.993907223, 1.000023103, 0.990430423),
    (16, 18): (0.795660392, 1.101731308, 1.025536736, 1.022749748),
    (16, 20): (1.0, 1.159720623, 1.0, 0.954215746),
    (17, 18): (1.0, 1.014832832, 1.0, 0.940587083),
    (17, 20): (1.0, 1.038993495, 1.0, 1.070941866),
}

assert len(PURE) == NC
