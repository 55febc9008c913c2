# shop_api/shared/utils/error_responses.py

# Respostas de erro genéricas
common_errors = {
    500: {
        "description": "Internal server error",
        "content": {
            "application/json": {
                "example": {"error": "Internal server error."}
            }
        }
    }
}

# Erros do gate de autenticação (rotas protegidas)
token_errors = {
    401: {
        "description": "Unauthorized (missing, invalid, expired or revoked token)",
        "content": {
            "application/json": {
                "examples": {
                    "missing_header": {
                        "summary": "Missing Header",
                        "value": {"error": "Authorization header missing"}
                    },
                    "invalid_scheme": {
                        "summary": "Invalid Scheme",
                        "value": {"error": "Invalid authorization scheme"}
                    },
                    "invalid_token": {
                        "summary": "Invalid Token",
                        "value": {"error": "Invalid token"}
                    },
                    "expired_token": {
                        "summary": "Expired Token",
                        "value": {"error": "Token has expired"}
                    },
                    "revoked_token": {
                        "summary": "Revoked Token",
                        "value": {"error": "Token has been invalidated, login again"}
                    }
                }
            }
        }
    }
}

# Erros para autenticação e registro de usuário
auth_errors = {
    400: {
        "description": "Bad Request (validation, duplicate email or bad credentials)",
        "content": {
            "application/json": {
                "examples": {
                    "validation": {
                        "summary": "Validation Error",
                        "value": {"error": "Password must be at least 6 characters long"}
                    },
                    "duplicate_email": {
                        "summary": "Email Already Registered",
                        "value": {"error": "User with this email already exists."}
                    },
                    "invalid_credentials": {
                        "summary": "Invalid Credentials",
                        "value": {"error": "Incorrect email or password."}
                    }
                }
            }
        }
    },
    **common_errors
}

# Erros para usuário autenticado
user_errors = {
    **token_errors,
    404: {
        "description": "User no longer exists",
        "content": {
            "application/json": {
                "example": {"error": "User not found."}
            }
        }
    },
    **common_errors
}

# Erros para produtos
product_errors = {
    400: {
        "description": "Bad Request (validation)",
        "content": {
            "application/json": {
                "example": {"error": "Quantity must be a positive integer"}
            }
        }
    },
    **token_errors,
    404: {
        "description": "Product not found",
        "content": {
            "application/json": {
                "example": {"error": "Product not found."}
            }
        }
    },
    **common_errors
}
