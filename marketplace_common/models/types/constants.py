# marketplace_common/models/types/constants.py

# Tortoise 应用标签（外键引用格式：PUBLIC_APP_LABEL + ".User"）
PUBLIC_APP_LABEL = "models"

# 需要注册到 Tortoise 的模型模块
MODEL_MODULES = ("marketplace_common.models",)
