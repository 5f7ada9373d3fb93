from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Files (relative paths resolve against the working directory)
    input_path: str = "data01.json"
    output_path: str = "resultado.json"

    # Output
    json_indent: int = 2

    # Log
    log_level: str = "INFO"

    model_config = {"env_prefix": "MERCADO_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
