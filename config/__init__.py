import os


def get_settings_module() -> str:
    # APP_ENV chọn module cấu hình, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    # pytest và CI dùng cấu hình testing (không kết nối Discord)
    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
