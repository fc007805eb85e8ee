"""
Messages returned to API clients
"""

# Request shape
INVALID_JSON = "JSON inválido"
BODY_NOT_OBJECT = "O corpo da requisição deve ser um objeto JSON"
INVALID_IDENTIFIER = "Identificador inválido"
INTERNAL_ERROR = "Erro interno do servidor"

# User fields
USER_NAME_REQUIRED = "Nome é obrigatório"
USER_NAME_NOT_TEXT = "Nome deve ser um texto"
USER_NAME_FULL = "Informe pelo menos nome e sobrenome"
USER_EMAIL_REQUIRED = "E-mail é obrigatório"
USER_EMAIL_NOT_TEXT = "E-mail deve ser um texto"
USER_EMAIL_INVALID = "E-mail inválido"
USER_PASSWORD_REQUIRED = "Senha é obrigatória"
USER_PASSWORD_NOT_TEXT = "Senha deve ser um texto"
USER_PASSWORD_TOO_SHORT = "A senha deve ter pelo menos 8 caracteres"

# Store fields
STORE_NAME_REQUIRED = "Nome da loja é obrigatório"
STORE_NAME_NOT_TEXT = "Nome da loja deve ser um texto"
STORE_USER_ID_REQUIRED = "userId é obrigatório"
STORE_USER_ID_NOT_INTEGER = "userId deve ser um número inteiro"

# Product fields
PRODUCT_NAME_REQUIRED = "Nome do produto é obrigatório"
PRODUCT_NAME_NOT_TEXT = "Nome do produto deve ser um texto"
PRODUCT_PRICE_REQUIRED = "Preço é obrigatório"
PRODUCT_PRICE_NOT_NUMBER = "Preço deve ser um número"
PRODUCT_PRICE_NOT_POSITIVE = "Preço deve ser maior que zero"
PRODUCT_STORE_ID_REQUIRED = "storeId é obrigatório"
PRODUCT_STORE_ID_NOT_INTEGER = "storeId deve ser um número inteiro"

# Lookups and conflicts
USER_NOT_FOUND = "Usuário não encontrado"
EMAIL_TAKEN = "E-mail já cadastrado"
USER_HAS_STORE = "Usuário possui uma loja vinculada"
STORE_NOT_FOUND = "Loja não encontrada"
STORE_REFERENCE_MISSING = "Loja informada não existe"
USER_ALREADY_HAS_STORE = "Usuário já possui uma loja"
STORE_HAS_PRODUCTS = "Loja possui produtos vinculados"
PRODUCT_NOT_FOUND = "Produto não encontrado"

# Generic failures per operation
USER_LIST_FAILED = "Erro ao listar usuários"
USER_FETCH_FAILED = "Erro ao buscar usuário"
USER_CREATE_FAILED = "Erro ao criar usuário"
USER_UPDATE_FAILED = "Erro ao atualizar usuário"
USER_DELETE_FAILED = "Erro ao deletar usuário"
STORE_LIST_FAILED = "Erro ao listar lojas"
STORE_FETCH_FAILED = "Erro ao buscar loja"
STORE_CREATE_FAILED = "Erro ao criar loja"
STORE_UPDATE_FAILED = "Erro ao atualizar loja"
STORE_DELETE_FAILED = "Erro ao deletar loja"
PRODUCT_LIST_FAILED = "Erro ao listar produtos"
PRODUCT_FETCH_FAILED = "Erro ao buscar produto"
PRODUCT_CREATE_FAILED = "Erro ao criar produto"
PRODUCT_UPDATE_FAILED = "Erro ao atualizar produto"
PRODUCT_DELETE_FAILED = "Erro ao deletar produto"
