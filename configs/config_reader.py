#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
配置文件读取器
读取YAML格式的cashila.yaml，提供API地址、客户端标识、证书目录和账户凭证的访问接口
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any
import logging

CONFIG_FILE = 'cashila.yaml'

DEFAULT_API_CONFIG = {
    'url': 'https://cashila-staging.com',
    'client_id': '',
    'ca_path': '',
    'timeout': 10,
}

# 环境变量覆盖: 配置键 -> 环境变量名
ENV_OVERRIDES = {
    'url': 'CASHILA_URL',
    'client_id': 'CASHILA_CLIENT_ID',
    'ca_path': 'SSL_CERT_DIR',
}


class ConfigReader:
    """配置文件读取器类"""

    def __init__(self, config_dir: str = None):
        """
        初始化配置读取器

        Args:
            config_dir: 配置文件目录路径，默认为当前文件所在目录
        """
        if config_dir is None:
            config_dir = os.path.dirname(os.path.abspath(__file__))

        self.config_dir = Path(config_dir)
        self._configs = {}
        self._logger = logging.getLogger(__name__)

    def load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        加载YAML配置文件

        Args:
            filename: 配置文件名（不包含路径）

        Returns:
            dict: 解析后的配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML解析错误
        """
        file_path = self.config_dir / filename

        if not file_path.exists():
            raise FileNotFoundError(f"配置文件不存在: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}

            # 缓存配置
            self._configs[filename] = config
            self._logger.info(f"成功加载配置文件: {filename}")
            return config

        except yaml.YAMLError as e:
            self._logger.error(f"YAML解析错误 {filename}: {e}")
            raise

    def _get_file(self, filename: str = CONFIG_FILE) -> Dict[str, Any]:
        if filename not in self._configs:
            self.load_yaml(filename)
        return self._configs[filename]

    def get_api_config(self) -> Dict[str, Any]:
        """
        获取API配置（默认值 < 配置文件 < 环境变量）

        Returns:
            dict: url, client_id, ca_path, timeout
        """
        config = dict(DEFAULT_API_CONFIG)
        config.update(self._get_file().get('cashila') or {})

        for key, env_name in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                config[key] = value

        config['timeout'] = float(config.get('timeout') or DEFAULT_API_CONFIG['timeout'])
        return config

    def get_account_config(self, account: str = None) -> Dict[str, Any]:
        """
        获取账户配置

        Args:
            account: 账户名称 (main等)，为None时返回所有账户

        Returns:
            dict: 账户配置信息
        """
        accounts = self._get_file().get('accounts') or {}
        if account is None:
            return accounts
        return accounts.get(account) or {}

    def get_account_credentials(self, account: str) -> Dict[str, str]:
        """
        获取指定账户的认证信息

        Args:
            account: 账户名称

        Returns:
            dict: {'token': ..., 'secret': ...}，缺失的字段为空字符串
        """
        account_config = self.get_account_config(account)
        return {
            'token': account_config.get('token') or '',
            'secret': account_config.get('secret') or '',
        }

    def list_available_accounts(self) -> list:
        """获取可用的账户列表"""
        return list(self.get_account_config().keys())

    def validate_account_config(self, account: str) -> bool:
        """
        验证账户配置是否完整（token和secret都不为空）

        Args:
            account: 账户名称

        Returns:
            bool: 配置是否完整
        """
        credentials = self.get_account_credentials(account)
        return all(credentials.get(field) for field in ('token', 'secret'))

    def get_config(self, key_path: str = None, filename: str = CONFIG_FILE) -> Any:
        """
        获取配置文件中的指定值

        Args:
            key_path: 键路径，用点分隔，如 'accounts.main.token'
            filename: 配置文件名

        Returns:
            配置值，键不存在时返回None

        Examples:
            url = reader.get_config('cashila.url')
        """
        config = self._get_file(filename)

        if key_path is None:
            return config

        value = config
        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            self._logger.warning(f"配置键不存在: {key_path}")
            return None

    def reload_config(self, filename: str = None):
        """
        重新加载配置文件

        Args:
            filename: 要重新加载的配置文件名，为None时重新加载所有已缓存的配置
        """
        if filename:
            self._configs.pop(filename, None)
            self.load_yaml(filename)
        else:
            cached = list(self._configs.keys())
            self._configs.clear()
            for name in cached:
                self.load_yaml(name)


# 创建全局配置读取器实例
config_reader = ConfigReader()

# 便捷函数
def get_api_config() -> Dict[str, Any]:
    """获取API配置的便捷函数"""
    return config_reader.get_api_config()

def get_account_credentials(account: str) -> Dict[str, str]:
    """获取账户认证信息的便捷函数"""
    return config_reader.get_account_credentials(account)

def validate_account_config(account: str) -> bool:
    """验证账户配置的便捷函数"""
    return config_reader.validate_account_config(account)
