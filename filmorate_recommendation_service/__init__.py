"""Film catalog with like-based popularity ranking and recommendations."""
