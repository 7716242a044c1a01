from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from entcheck.features.sampling import SamplingMode
from entcheck.features.stats import PValueMethod

PROJECT_ROOT = Path(__file__).resolve().parent

class AnalysisConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: SamplingMode = SamplingMode.BYTE
    fold_case: bool = False
    p_value_method: PValueMethod = PValueMethod.NORMAL

class OutputSettings(BaseModel):
    terse: bool = False
    print_table: bool = False
    print_result: bool = True
    json_output: bool = False

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ENTCHECK_", env_nested_delimiter="__", env_file=".env", extra="ignore")

    analysis: AnalysisConfig = AnalysisConfig()
    output: OutputSettings = OutputSettings()
    read_chunk_size: int = Field(default=1 << 16, gt=0)
    log_level: str = "WARNING"

settings = Settings()
