import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name="cashila", log_dir=None, level=logging.INFO) -> logging.Logger:
    """
    设置日志器

    Args:
        name: logger名称
        log_dir: 日志目录，为None时只输出到控制台
        level: 日志级别

    Returns:
        logging.Logger
    """
    logger = logging.getLogger(name)

    # 避免重复添加handler
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if log_dir is not None:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            # 按天轮转,保留90天
            file_handler = TimedRotatingFileHandler(
                filename=log_path / f"{name}.log",
                when='midnight',
                interval=1,
                backupCount=90,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        logger.setLevel(level)
    return logger
