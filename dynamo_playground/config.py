# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Application configuration."""

import json
from functools import lru_cache

from botocore.config import Config
from pydantic import BaseModel, Field, model_validator  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict

from dynamo_playground.version import get_version


class AppConfig(BaseModel):
    """Application configuration."""

    title: str = Field(default='DynamoDB Playground API')
    description: str = Field(
        default='Object-level CRUD over a single DynamoDB table with secondary indexes'
    )
    version: str = Field(default_factory=get_version)


class APIConfig(BaseModel):
    """API configuration."""

    host: str = Field(default='localhost')
    port: int = Field(default=8000)
    cors_origins: list[str] | str = Field(default=['*'])
    log_level: str = Field(default='INFO')

    @model_validator(mode='after')
    def parse_cors_origins(self) -> 'APIConfig':
        """Parse CORS origins from string to list if needed."""
        if isinstance(self.cors_origins, str):
            try:
                self.cors_origins = json.loads(self.cors_origins)
            except json.JSONDecodeError:
                if isinstance(self.cors_origins, str):
                    self.cors_origins = self.cors_origins.split(',')
        return self


class DynamoDBConfig(BaseModel):
    """DynamoDB configuration."""

    endpoint_url: str | None = Field(default=None)
    region: str = Field(default='us-east-1')
    table_name: str = Field(default='table-records')
    partition_key: str = Field(default='object')
    local_mode: bool = Field(default=False)
    local_access_key_id: str = Field(default='123')
    local_secret_access_key: str = Field(default='123')
    ensure_table: bool = Field(default=False)


class AWSConfig(BaseModel):
    """AWS configuration."""

    region: str = Field(default='us-east-1')
    endpoint_url: str | None = Field(default=None)
    profile_name: str | None = Field(default=None)
    dynamodb: DynamoDBConfig = Field(default_factory=DynamoDBConfig)

    def get_boto_config(self, service_name: str) -> Config:
        """Get botocore config for a service.

        Retries are disabled: storage failures surface to the caller on the
        first attempt.
        """
        region = self.region
        if service_name == 'dynamodb':
            region = self.dynamodb.region or self.region

        return Config(
            region_name=region,
            signature_version='v4',
            retries={'max_attempts': 1, 'mode': 'standard'},
        )


class Settings(BaseSettings):
    """Application settings using Pydantic's BaseSettings for automatic env var loading."""

    # Application Environment
    environment: str = Field(
        default='dev', description='Application environment (e.g., dev, production)'
    )

    # API settings
    api_host: str = Field(default='localhost')
    api_port: int = Field(default=8000)
    api_cors_origins: list[str] | str = Field(default=['*'])
    api_log_level: str = Field(default='INFO')

    # AWS settings
    aws_region: str = Field(default='us-east-1')
    aws_endpoint_url: str | None = Field(default=None)
    aws_profile_name: str | None = Field(default=None)

    # DynamoDB settings
    dynamodb_endpoint_url: str | None = Field(default=None)
    dynamodb_region: str = Field(default='us-east-1')
    dynamodb_table_name: str = Field(default='table-records')
    dynamodb_partition_key: str = Field(default='object')
    dynamodb_local_mode: bool = Field(default=False)
    dynamodb_local_access_key_id: str = Field(default='123')
    dynamodb_local_secret_access_key: str = Field(default='123')
    dynamodb_ensure_table: bool = Field(default=False)

    # Configure environment variable loading
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        return AppConfig()

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        return APIConfig(
            host=self.api_host,
            port=self.api_port,
            cors_origins=self.api_cors_origins,
            log_level=self.api_log_level,
        )

    def get_dynamodb_config(self) -> DynamoDBConfig:
        """Get DynamoDB configuration."""
        return DynamoDBConfig(
            endpoint_url=self.dynamodb_endpoint_url,
            region=self.dynamodb_region,
            table_name=self.dynamodb_table_name,
            partition_key=self.dynamodb_partition_key,
            local_mode=self.dynamodb_local_mode,
            local_access_key_id=self.dynamodb_local_access_key_id,
            local_secret_access_key=self.dynamodb_local_secret_access_key,
            ensure_table=self.dynamodb_ensure_table,
        )

    def get_aws_config(self) -> AWSConfig:
        """Get AWS configuration."""
        return AWSConfig(
            region=self.aws_region,
            endpoint_url=self.aws_endpoint_url,
            profile_name=self.aws_profile_name,
            dynamodb=self.get_dynamodb_config(),
        )

    @property
    def app(self) -> AppConfig:
        """Get application configuration."""
        return self.get_app_config()

    @property
    def api(self) -> APIConfig:
        """Get API configuration."""
        return self.get_api_config()

    @property
    def aws(self) -> AWSConfig:
        """Get AWS configuration."""
        return self.get_aws_config()

    @property
    def dynamodb(self) -> DynamoDBConfig:
        """Get DynamoDB configuration."""
        return self.get_dynamodb_config()

    @property
    def is_production(self) -> bool:
        """Whether the app runs in production."""
        return self.environment.lower() == 'production'


@lru_cache
def get_settings() -> Settings:
    """Get application settings with caching."""
    return Settings()
