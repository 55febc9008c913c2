# shop_api/shared/utils/success_responses.py

# Respostas de sucesso genéricas
common_success = {
    200: {
        "description": "Request processed successfully",
        "content": {
            "application/json": {
                "example": {"message": "Logged out"}
            }
        }
    }
}

_user_example = {
    "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
    "username": "alice",
    "email": "alice@example.com",
    "role": "user",
    "avatar": None,
    "created_at": "2024-01-01T00:00:00",
    "updated_at": "2024-01-01T00:00:00"
}

_product_example = {
    "id": "6a1f0c4e-1b2d-4c3e-9f8a-7b6c5d4e3f2a",
    "name": "Keyboard",
    "description": "Mechanical keyboard",
    "price": 49.9,
    "quantity": 10,
    "created_at": "2024-01-01T00:00:00",
    "updated_at": "2024-01-01T00:00:00"
}

# Sucessos para autenticação e usuários
auth_success = {
    201: {
        "description": "User created successfully",
        "content": {
            "application/json": {
                "example": {"message": "User registered successfully", "data": _user_example}
            }
        }
    },
    **common_success
}

login_success = {
    200: {
        "description": "Authenticated, token issued",
        "content": {
            "application/json": {
                "example": {"token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."}
            }
        }
    }
}

user_success = {
    200: {
        "description": "Current user",
        "content": {
            "application/json": {
                "example": {"data": _user_example}
            }
        }
    }
}

# Sucessos para produtos
product_created_success = {
    201: {
        "description": "Product created successfully",
        "content": {
            "application/json": {
                "example": {"message": "Product added successfully", "data": _product_example}
            }
        }
    }
}

product_success = {
    200: {
        "description": "Product returned",
        "content": {
            "application/json": {
                "example": {"data": _product_example}
            }
        }
    }
}

product_list_success = {
    200: {
        "description": "Paginated list of products, newest first",
        "content": {
            "application/json": {
                "example": {"data": [_product_example], "total": 1, "page": 1, "size": 20, "pages": 1}
            }
        }
    }
}

product_deleted_success = {
    200: {
        "description": "Product deleted",
        "content": {
            "application/json": {
                "example": {"message": "Product deleted successfully"}
            }
        }
    }
}
