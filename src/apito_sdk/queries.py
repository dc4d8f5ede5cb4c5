"""GraphQL documents sent by ApitoClient.

Field names (``getSingleData``, ``getModelData``, ``upsertModelData``, ...)
must match the Apito backend schema exactly.
"""

_DOCUMENT_FIELDS = """
    _key
    data
    meta {
      created_at
      updated_at
      status
      revision
      revision_at
    }
    id
    expire_at
    relation_doc_id
    type
"""

_SEARCH_RESULT_FIELDS = """
    results {
      id
      relation_doc_id
      data
      type
      expire_at
      meta {
        created_at
        updated_at
        status
        root_revision_id
      }
    }
    count
"""

GENERATE_TENANT_TOKEN = """
mutation GenerateTenantToken($token: String!, $tenantId: String!) {
  generateTenantToken(token: $token, tenant_id: $tenantId) {
    token
  }
}
"""

GET_SINGLE_DATA = f"""
query GetSingleData($model: String, $_id: String!, $single_page_data: Boolean) {{
  getSingleData(model: $model, _id: $_id, single_page_data: $single_page_data) {{{_DOCUMENT_FIELDS}  }}
}}
"""

GET_MODEL_DATA = f"""
query GetModelData(
  $model: String!
  $page: Int
  $limit: Int
  $_key: JSON
  $where: JSON
  $search: String
) {{
  getModelData(
    model: $model
    page: $page
    limit: $limit
    _key: $_key
    where: $where
    search: $search
  ) {{{_SEARCH_RESULT_FIELDS}  }}
}}
"""

# Same selection as GET_MODEL_DATA, scoped by a relation descriptor.
GET_RELATION_DOCUMENTS = f"""
query GetRelationDocuments(
  $model: String!
  $page: Int
  $limit: Int
  $where: JSON
  $search: String
  $connection: JSON
) {{
  getModelData(
    model: $model
    page: $page
    limit: $limit
    where: $where
    search: $search
    connection: $connection
  ) {{{_SEARCH_RESULT_FIELDS}  }}
}}
"""

CREATE_NEW_RESOURCE = f"""
mutation CreateNewResource(
  $model: String!
  $payload: JSON!
  $connect: JSON
  $single_page_data: Boolean
) {{
  upsertModelData(
    model_name: $model
    payload: $payload
    connect: $connect
    single_page_data: $single_page_data
  ) {{{_DOCUMENT_FIELDS}  }}
}}
"""

UPDATE_RESOURCE = f"""
mutation UpdateResource(
  $model: String!
  $_id: String!
  $payload: JSON!
  $connect: JSON
  $disconnect: JSON
  $single_page_data: Boolean
  $force_update: Boolean
) {{
  upsertModelData(
    model_name: $model
    _id: $_id
    payload: $payload
    connect: $connect
    disconnect: $disconnect
    single_page_data: $single_page_data
    force_update: $force_update
  ) {{{_DOCUMENT_FIELDS}  }}
}}
"""

DELETE_RESOURCE = """
mutation DeleteResource($model: String!, $_id: String!) {
  deleteModelData(model_name: $model, _id: $_id) {
    id
  }
}
"""

SEND_AUDIT_LOG = """
mutation SendAuditLog($auditData: JSON!) {
  sendAuditLog(auditData: $auditData) {
    message
  }
}
"""

DEBUG = """
mutation Debug($stage: String!, $data: JSON) {
  debug(stage: $stage, data: $data) {
    message
    data
  }
}
"""
