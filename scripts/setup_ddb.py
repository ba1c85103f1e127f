#!/usr/bin/env python3
# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""
Script to create the records table in DynamoDB Local for development.
"""

import os
import sys

import boto3
from botocore.exceptions import ClientError
from dotenv import load_dotenv

from dynamo_playground.clients.dynamodb.schema import get_schema


def main():
    """Main function to setup DynamoDB table."""
    # Load .env file
    load_dotenv()

    endpoint_url = os.environ.get('DYNAMODB_ENDPOINT_URL', 'http://localhost:8001')
    region = os.environ.get('DYNAMODB_REGION', 'us-east-1')
    table_name = os.environ.get('DYNAMODB_TABLE_NAME', 'table-records')
    reset_table = os.environ.get('RESET_TABLE', 'false').lower() == 'true'

    print(f"Setting up DynamoDB table '{table_name}' at {endpoint_url}")
    if reset_table:
        print('Reset mode enabled - will delete existing table')

    try:
        # DynamoDB Local accepts any static credentials
        ddb = boto3.resource(
            'dynamodb',
            endpoint_url=endpoint_url,
            region_name=region,
            aws_access_key_id=os.environ.get('DYNAMODB_LOCAL_ACCESS_KEY_ID', '123'),
            aws_secret_access_key=os.environ.get(
                'DYNAMODB_LOCAL_SECRET_ACCESS_KEY', '123'
            ),
        )

        # Check if table exists and handle reset
        table_exists = False
        try:
            table = ddb.Table(table_name)
            table.load()
            table_exists = True

            if reset_table:
                print(f"Deleting existing table '{table_name}' for reset...")
                table.delete()
                table.wait_until_not_exists()
                table_exists = False
        except ClientError as e:
            if e.response['Error']['Code'] != 'ResourceNotFoundException':
                raise

        if not table_exists:
            print(f"Creating table '{table_name}' with its secondary indexes...")
            table = ddb.create_table(**get_schema(table_name))
            table.wait_until_exists()
            print(
                f"DynamoDB table '{table_name}' created successfully at {endpoint_url}"
            )
        else:
            print(f"Table '{table_name}' already exists, skipping creation")

    except Exception as e:
        print(f'Error: {e}')
        sys.exit(1)


if __name__ == '__main__':
    main()
