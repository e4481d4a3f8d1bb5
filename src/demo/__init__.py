"""
Demo — демонстрационный драйвер для BigNumber

Внешний потребитель публичного API; не входит в арифметическое ядро.
"""
