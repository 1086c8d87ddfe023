# Adaptadores de salida
