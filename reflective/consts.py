# Data class field metadata key holding additional modifier bits
REFLECTIVE = "reflective"
