import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    # Banco em memória: os dados de exemplo são carregados a cada inicialização.
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite://")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"

APP_NOME = "Agencia Viagens"

TIPOS_VEICULO = [
    "Van",
    "Micro-ônibus",
    "Ônibus",
    "Carro Executivo",
]

CATEGORIAS_CNH = ["A", "B", "C", "D", "E"]
