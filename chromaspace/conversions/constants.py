# No dependencies beyond numpy
import numpy as np

# ---- Reference white points (CIE 1931 2°, Y normalised to 1) ----
D50 = np.array([0.96422, 1.00000, 0.82521])
D55 = np.array([0.95682, 1.00000, 0.92149])
D60 = np.array([0.96720, 1.00000, 0.81427])
D65 = np.array([0.95047, 1.00000, 1.08883])
D75 = np.array([0.94972, 1.00000, 1.22638])

WHITE_POINTS = {
    "D50": D50,
    "D55": D55,
    "D60": D60,
    "D65": D65,
    "D75": D75,
}

# u'v' chromaticity of D65
D65_U = 4.0 * D65[0] / (D65[0] + 15.0 * D65[1] + 3.0 * D65[2])
D65_V = 9.0 * D65[1] / (D65[0] + 15.0 * D65[1] + 3.0 * D65[2])

# ---- sRGB transfer function ----
SRGB_GAMMA = 2.4
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308

# ---- Linear sRGB <-> XYZ (D65) ----
M_SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
M_XYZ_TO_SRGB = np.linalg.inv(M_SRGB_TO_XYZ)

# Luminance weights, the Y row of the matrix above
LUMINANCE_WEIGHTS = M_SRGB_TO_XYZ[1]

# ---- Linear Display P3 <-> XYZ (D65) ----
M_P3_TO_XYZ = np.array([
    [0.48657095, 0.26566769, 0.19821729],
    [0.22897456, 0.69173852, 0.07928691],
    [0.0,        0.04511338, 1.04394437],
])
M_XYZ_TO_P3 = np.linalg.inv(M_P3_TO_XYZ)

# ---- CIELAB / CIELUV ----
LAB_EPSILON = 216.0 / 24389.0   # (6/29)^3
LAB_KAPPA = 24389.0 / 27.0      # (29/3)^3
LAB_DELTA = 6.0 / 29.0

# ---- OKLab (Ottosson), defined on linear sRGB ----
M_SRGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])
M_LMS_TO_SRGB = np.linalg.inv(M_SRGB_TO_LMS)

M_LMS_TO_OKLAB = np.array([
    [0.2104542553,  0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050,  0.4505937099],
    [0.0259040371,  0.7827717662, -0.8086757660],
])
M_OKLAB_TO_LMS = np.linalg.inv(M_LMS_TO_OKLAB)

# OKHSL toe function
OK_TOE_K1 = 0.206
OK_TOE_K2 = 0.03
OK_TOE_K3 = (1.0 + OK_TOE_K1) / (1.0 + OK_TOE_K2)
OK_S0 = 0.5

# ---- Jzazbz (Safdar et al. 2017) ----
JZ_B = 1.15
JZ_G = 0.66
JZ_N = 2610.0 / 2.0 ** 14
JZ_C1 = 3424.0 / 2.0 ** 12
JZ_C2 = 2413.0 / 2.0 ** 7
JZ_C3 = 2392.0 / 2.0 ** 7
JZ_P = 1.7 * 2523.0 / 2.0 ** 5
JZ_D = -0.56
JZ_D0 = 1.6295499532821566e-11
JZ_PEAK = 10000.0

M_JZ_XYZ_TO_LMS = np.array([
    [0.41478972, 0.579999, 0.0146480],
    [-0.2015100, 1.120649, 0.0531008],
    [-0.0166008, 0.264800, 0.6684799],
])
M_JZ_LMS_TO_XYZ = np.linalg.inv(M_JZ_XYZ_TO_LMS)

M_JZ_LMS_TO_IAB = np.array([
    [0.5, 0.5, 0.0],
    [3.524000, -4.066708, 0.542708],
    [0.199076, 1.096799, -1.295875],
])
M_JZ_IAB_TO_LMS = np.linalg.inv(M_JZ_LMS_TO_IAB)

# ---- CMYK ----
# Black channel at or above this is treated as pure black
CMYK_BLACK_TH = 1.0 - 1e-6
