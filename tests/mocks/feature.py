"""Canned feature service payloads."""

LAYER_URL = "https://services.arcgis.com/V6ZHFr6zdgNZuVG0/arcgis/rest/services/Landscape_Trees/FeatureServer/0"

feature_response = {
    "feature": {
        "attributes": {
            "FID": 42,
            "Tree_ID": 42,
            "Collected": 1349395200000,
            "Crew": "Linden+ Forrest+ Johnny",
            "Status": "P",
            "Cmn_Name": "Willow oak",
            "Condition": "Good",
        },
        "geometry": {"x": -9177311.62541634, "y": 4247151.205222242},
    }
}

query_response = {
    "objectIdFieldName": "FID",
    "globalIdFieldName": "",
    "geometryType": "esriGeometryPoint",
    "spatialReference": {"wkid": 102100, "latestWkid": 3857},
    "fieldAliases": {"FID": "FID", "Tree_ID": "Tree_ID", "Cmn_Name": "Cmn_Name"},
    "fields": [
        {"name": "FID", "type": "esriFieldTypeOID", "alias": "FID", "sqlType": "sqlTypeInteger"},
        {"name": "Tree_ID", "type": "esriFieldTypeInteger", "alias": "Tree_ID", "sqlType": "sqlTypeInteger"},
        {"name": "Cmn_Name", "type": "esriFieldTypeString", "alias": "Cmn_Name", "length": 50},
    ],
    "features": [
        {
            "attributes": {"FID": 1, "Tree_ID": 102, "Cmn_Name": "Siberian elm"},
            "geometry": {"x": -9177311.62541634, "y": 4247151.205222242},
        },
        {
            "attributes": {"FID": 2, "Tree_ID": 103, "Cmn_Name": "Willow oak"},
            "geometry": {"x": -9177334.63180497, "y": 4247165.011463939},
        },
    ],
    "exceededTransferLimit": True,
}

add_features_response = {"addResults": [{"objectId": 1001, "success": True}]}

update_features_response = {"updateResults": [{"objectId": 1001, "success": True}]}

delete_features_response = {"deleteResults": [{"objectId": 1001, "success": True}]}

mixed_delete_response = {
    "deleteResults": [
        {"objectId": 1001, "success": True},
        {
            "objectId": 1002,
            "success": False,
            "error": {"code": 1019, "description": "Delete for the object was not attempted. Object may not exist."},
        },
    ]
}

apply_edits_response = {
    "addResults": [{"objectId": 1003, "globalId": "{A3A1E1E2-0000-4D5A-9A5C-4B1D1A1E0003}", "success": True}],
    "updateResults": [{"objectId": 1001, "success": True}],
    "deleteResults": [{"objectId": 1002, "success": True}],
}

attachments_response = {
    "attachmentInfos": [
        {"id": 409, "contentType": "image/jpeg", "size": 117198, "name": "bark.jpg"},
        {"id": 410, "contentType": "image/png", "size": 2044, "name": "leaf.png"},
    ]
}

add_attachment_response = {"addAttachmentResult": {"objectId": 411, "globalId": None, "success": True}}

update_attachment_response = {"updateAttachmentResult": {"objectId": 409, "success": True}}

delete_attachments_response = {
    "deleteAttachmentResults": [{"objectId": 409, "success": True}, {"objectId": 410, "success": True}]
}

error_response = {
    "error": {
        "code": 400,
        "message": "Unable to complete operation.",
        "details": ["'where' parameter is invalid"],
    }
}
