# Adaptadores de entrada: API y CLI
