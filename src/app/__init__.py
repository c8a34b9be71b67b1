"""App — núcleo do serviço: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (erasure)
- infra/: implementações concretas de IO (cliente HTTP)
- protocols/: contratos e modelos
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura.
"""
