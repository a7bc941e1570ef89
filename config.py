# Configuration Constants

# Dihedral group D5 generators (permutations of the 5 pentagon vertices)
ROTATION = (1, 2, 3, 4, 0)   # r: vertex x -> (x + 1) mod 5
REFLECTION = (0, 4, 3, 2, 1)  # s: reflection through the axis of vertex 0
GROUP_ORDER = 10

# Digit permutation schedule
# sigma = (0 1 5 8 9 4 2 7)(3 6), unrelated to the group above
SIGMA = (1, 5, 7, 6, 2, 8, 3, 0, 9, 4)
P_ROWS = 8

# Sample input used when the CLI is given an empty line
SAMPLE_NUMBER = "89462597507"

# Aadhaar numbers carry a trailing Verhoeff check digit
AADHAAR_LENGTH = 12
AADHAAR_BODY_LENGTH = AADHAAR_LENGTH - 1

# Logging
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
MASK_MIN_DIGITS = 8  # Digit runs at least this long are masked in log output
MASK_KEEP_DIGITS = 4
