# Configuración
