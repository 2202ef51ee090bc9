"""Key schema definition of the product table."""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from .product import CATEGORY, PRODUCT_NAME


class KeyType(str, Enum):
    HASH = "HASH"
    RANGE = "RANGE"


class ScalarAttributeType(str, Enum):
    STRING = "S"
    NUMBER = "N"


class BillingMode(str, Enum):
    PAY_PER_REQUEST = "PAY_PER_REQUEST"
    PROVISIONED = "PROVISIONED"


class KeyAttribute(BaseModel):
    """One key attribute: its definition and its role in the key schema."""

    name: str = Field(..., min_length=1)
    attribute_type: ScalarAttributeType = ScalarAttributeType.STRING
    key_type: KeyType

    def definition(self) -> Dict[str, str]:
        return {'AttributeName': self.name, 'AttributeType': self.attribute_type.value}

    def schema_element(self) -> Dict[str, str]:
        return {'AttributeName': self.name, 'KeyType': self.key_type.value}


class TableSchema(BaseModel):
    """
    Table definition for CreateTable.

    Only key attributes are declared; DynamoDB is schemaless for the rest,
    so price never appears here.
    """

    partition_key: KeyAttribute
    sort_key: KeyAttribute
    billing_mode: BillingMode = BillingMode.PAY_PER_REQUEST

    @property
    def key_attributes(self) -> List[KeyAttribute]:
        return [self.partition_key, self.sort_key]

    def attribute_definitions(self) -> List[Dict[str, str]]:
        return [attribute.definition() for attribute in self.key_attributes]

    def key_schema(self) -> List[Dict[str, str]]:
        return [attribute.schema_element() for attribute in self.key_attributes]

    def to_create_table_kwargs(self, table_name: str) -> Dict[str, Any]:
        """Build boto3 create_table parameters for this schema."""
        return {
            'TableName': table_name,
            'BillingMode': self.billing_mode.value,
            'AttributeDefinitions': self.attribute_definitions(),
            'KeySchema': self.key_schema(),
        }


PRODUCT_TABLE_SCHEMA = TableSchema(
    partition_key=KeyAttribute(name=CATEGORY, key_type=KeyType.HASH),
    sort_key=KeyAttribute(name=PRODUCT_NAME, key_type=KeyType.RANGE),
)
