import argparse
import logging
import math
import time
from datetime import date
from threading import Barrier, Lock, Thread
from typing import List, Optional

from creational import singleton
from creational.config import RACE_DELAY_SECS
from creational.factory_method import ConcreteCreator1, ConcreteCreator2, Point, Point2, PointFactory, client_code
from creational.naive_singleton import NaiveSingleton, NaiveSingletonRegistry
from creational.prototype import IdInfo, Person, display_values
from creational.qlogger import init_log
from creational.singleton import SingletonRegistry

log = logging.getLogger(__name__)

DEMOS = ("singleton", "naive", "factory", "prototype")

# print() writes the text and the newline separately; threads must not interleave them
_print_lock = Lock()


def singleton_demo(reg: Optional[SingletonRegistry] = None) -> List[str]:
    """Race two threads to create the singleton; both should print the same value."""
    reg = reg or singleton.registry
    print("If you see the same value, then singleton was reused (yay!)")
    print("If you see different values, then 2 singletons were created (booo!!)")
    print()
    print("RESULT:")
    print()

    results = []

    def test_singleton(value: str):
        instance = reg.get_instance(value)
        results.append(instance.value)
        with _print_lock:
            print(instance.value)

    threads = [Thread(target=test_singleton, args=(value,)) for value in ("FOO", "BAR")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    return results


def naive_singleton_demo(reg: Optional[NaiveSingletonRegistry] = None) -> bool:
    reg = reg or NaiveSingletonRegistry()
    s1 = reg.get_instance()
    s2 = reg.get_instance()

    same = s1 is s2
    if same:
        print("Singleton works, both variables contain the same instance.")
    else:
        print("Singleton failed, variables contain different instances.")
    print(s1.some_business_logic())
    return same


def naive_race_demo(threads: int = 2, delay: float = RACE_DELAY_SECS) -> int:
    """Hit an unlocked singleton from several threads at once and count the constructions."""
    created = []

    def slow_factory():
        time.sleep(delay)
        inst = NaiveSingleton()
        created.append(inst)
        return inst

    reg = NaiveSingletonRegistry(factory=slow_factory)
    barrier = Barrier(threads)

    def worker():
        barrier.wait()
        reg.get_instance()

    workers = [Thread(target=worker) for _ in range(threads)]
    for t in workers:
        t.start()
    for t in workers:
        t.join()

    print(f"Naive singleton raced by {threads} threads: {len(created)} instance(s) created")
    return len(created)


def factory_method_demo():
    print("App: Launched with the ConcreteCreator1.")
    print(client_code(ConcreteCreator1()))
    print()
    print("App: Launched with the ConcreteCreator2.")
    print(client_code(ConcreteCreator2()))

    for new_polar, new_cartesian in (
            (Point.new_polar, Point.new_cartesian),
            (PointFactory.new_polar, PointFactory.new_cartesian),
            (Point2.Factory.new_polar, Point2.Factory.new_cartesian),
    ):
        print()
        print(new_polar(5, math.pi / 4))
        print(new_cartesian(50, 45))


def _print_person(p: Person):
    for line in display_values(p):
        print("      " + line)


def prototype_demo():
    p1 = Person(name="Jovan Petkoski", age=24, birth_date=date(1995, 1, 20), id=IdInfo(id_number=23))
    p2 = p1.shallow_copy()
    p3 = p1.deep_copy()

    print("Original values of p1, p2, p3:")
    print("   p1 instance values: ")
    _print_person(p1)
    print("   p2 instance values:")
    _print_person(p2)
    print("   p3 instance values:")
    _print_person(p3)

    p1.age = 34
    p1.birth_date = date(2005, 2, 22)
    p1.name = "Frank"
    p1.id.id_number = 33
    print()
    print("Values of p1, p2 and p3 after changes to p1:")
    print("   p1 instance values: ")
    _print_person(p1)
    print("   p2 instance values (reference values have changed):")
    _print_person(p2)
    print("   p3 instance values (everything was kept the same):")
    _print_person(p3)

    # the shallow copy pitfall
    print()
    print()
    john = Person(name="John Smith", age=18, birth_date=date(2000, 5, 25), id=IdInfo(id_number=1))
    jane = john.shallow_copy()
    jane.name = "Jane Smith"
    jane.age = 28
    jane.birth_date = date(2005, 6, 26)
    # john's id changes too
    jane.id.id_number = 2
    _print_person(john)
    _print_person(jane)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(prog="creational-demo", description="Creational design pattern demos")
    parser.add_argument("demo", choices=DEMOS + ("all",), nargs="?", default="all")
    parser.add_argument("--log-level", default=None, help="root log level (default from CREATIONAL_LOG_LEVEL)")
    args = parser.parse_args(argv)

    listener = init_log(args.log_level and args.log_level.upper())
    try:
        names = DEMOS if args.demo == "all" else (args.demo,)
        for i, name in enumerate(names):
            if i:
                print()
            log.info("running %s demo", name)
            if name == "singleton":
                singleton_demo()
            elif name == "naive":
                naive_singleton_demo()
                naive_race_demo()
            elif name == "factory":
                factory_method_demo()
            else:
                prototype_demo()
    finally:
        listener.stop()


if __name__ == "__main__":
    main()
