import threading
import unittest

from user_timezones.registry import UserTimezoneRegistry


class UserTimezoneRegistryTests(unittest.TestCase):
    def setUp(self):
        self.registry = UserTimezoneRegistry()

    def test_lookup_returns_saved_identifier(self):
        self.registry.save('u1', 'Asia/Tokyo')
        self.assertEqual(self.registry.lookup('u1'), 'Asia/Tokyo')

    def test_save_overwrites_previous_value(self):
        self.registry.save('u1', 'Asia/Tokyo')
        self.registry.save('u1', 'Europe/Berlin')
        self.assertEqual(self.registry.lookup('u1'), 'Europe/Berlin')
        self.assertEqual(len(self.registry), 1)

    def test_lookup_unknown_user_returns_none(self):
        self.assertIsNone(self.registry.lookup('never-saved'))

    def test_does_not_validate_identifiers(self):
        self.registry.save('', 'Not/A_Zone')
        self.assertEqual(self.registry.lookup(''), 'Not/A_Zone')

    def test_concurrent_saves_for_distinct_users_are_all_kept(self):
        def worker(start):
            for i in range(start, start + 200):
                self.registry.save(f'user-{i}', 'UTC')

        threads = [threading.Thread(target=worker, args=(n * 200,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(self.registry), 1600)
        self.assertEqual(self.registry.lookup('user-1599'), 'UTC')

    def test_concurrent_saves_for_same_user_keep_one_written_value(self):
        identifiers = ['Asia/Tokyo', 'Europe/Berlin', 'America/Chicago', 'UTC']

        def worker(identifier):
            for _ in range(100):
                self.registry.save('shared', identifier)
                self.assertIn(self.registry.lookup('shared'), identifiers)

        threads = [threading.Thread(target=worker, args=(tz,)) for tz in identifiers]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertIn(self.registry.lookup('shared'), identifiers)
        self.assertEqual(len(self.registry), 1)


if __name__ == '__main__':
    unittest.main()
