# Núcleo: dominio, puertos y servicios
