"""刮削工具配置管理模块"""
import os
import copy
import yaml
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'logging': {
        'level': 'INFO',
    },
    'metadata': {
        'date_format': 'yyyy-MM-dd',
        'running_time_regex': r'(\d+)\s*min',
    },
    'scoring': {
        'compressed': False,
    },
}


class Config:
    def __init__(self, config_path: Optional[str] = None):
        """初始化配置管理器，未指定路径时不读取文件"""
        self.config_path = os.path.abspath(config_path) if config_path else None
        if self.config_path:
            logger.debug(f"使用配置文件路径: {self.config_path}")
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """加载配置文件"""
        default_config = copy.deepcopy(DEFAULT_CONFIG)
        if not self.config_path:
            return default_config

        if not os.path.exists(self.config_path):
            logger.warning(f"配置文件不存在: {self.config_path}，使用默认配置")
            return default_config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
                logger.debug(f"从配置文件加载的内容: {config}")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"加载配置文件失败: {str(e)}")
            logger.info("使用默认配置")
            return default_config

        if not config:
            logger.warning("配置文件为空，使用默认配置")
            return default_config
        if not isinstance(config, dict):
            logger.warning("配置文件格式不正确，使用默认配置")
            return default_config

        # 用户配置覆盖默认配置，缺失的部分使用默认值
        merged_config = default_config
        for section, values in config.items():
            if isinstance(values, dict) and isinstance(merged_config.get(section), dict):
                merged_config[section].update(values)
            else:
                merged_config[section] = values
        return merged_config

    def get(self, key: str, default: Any = None) -> Any:
        """
        获取配置项值

        Args:
            key: 配置项键名，支持嵌套键，如 "metadata.date_format"
            default: 默认值

        Returns:
            配置项值，如果不存在则返回默认值
        """
        value = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    @property
    def log_level(self) -> str:
        return str(self.get('logging.level', 'INFO')).upper()

    @property
    def date_format(self) -> str:
        """输入日期的默认模式"""
        return self.get('metadata.date_format', 'yyyy-MM-dd')

    @property
    def running_time_regex(self) -> str:
        return self.get('metadata.running_time_regex', r'(\d+)\s*min')

    @property
    def compressed_scoring(self) -> bool:
        """是否默认使用压缩标题评分"""
        return bool(self.get('scoring.compressed', False))
