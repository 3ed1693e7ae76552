"""
Backend de agendamentos do Pet Shop.

Estrutura:
- config.py         : variáveis de ambiente (.env) e valores padrão
- logging_config.py : configuração de logging em JSON
- errors.py         : hierarquia de exceções
- db.py             : pool de conexões SQLAlchemy sobre o arquivo SQLite
- models.py         : tabelas ORM e ordem das colunas
- schema.py         : criação idempotente das tabelas
- mapper.py         : campos do formulário -> registros tipados
- services.py       : gravação dos agendamentos
- api_main.py       : aplicação FastAPI (formulários HTML)
- cli.py            : linha de comando
"""
