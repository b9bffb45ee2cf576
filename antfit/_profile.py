#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Static FIT profile data, transcribed from the "Profile.xlsx" workbook that
ships with the FIT SDK.

Only the messages this package decodes are listed. A message's table maps the
field definition number to a dictionary with the keys ``field_name`` and
``field_type`` and, where the profile gives them, ``scale``, ``offset``,
``units`` and ``accumulate``. A ``field_type`` is either one of the base type
names below or a key of `TYPES`.

"""
from math import isnan

from antfit import _extract


class BaseType:
    __slots__ = ('name', 'parse')

    def __init__(self, **kwargs):
        for name, value in kwargs.items():
            setattr(self, name, value)

    @property
    def extract(self):
        return _extract.EXTRACTORS[self.name]

    @property
    def size(self):
        return self.extract.size

    def __repr__(self):
        return 'BaseType(%r)' % self.name


BASE_TYPE_BYTE = BaseType(name='byte', parse=lambda x: None if all(b == 0xFF for b in x) else x)

# Keyed by the low four bits of the base type byte.
# Decide how invalid values are to be handled with the `parse` attribute.
BASE_TYPES = {
    0:  BaseType(name='enum', parse=lambda x: None if x == 0xFF else x),
    1:  BaseType(name='int8', parse=lambda x: None if x == 0x7F else x),
    2:  BaseType(name='uint8', parse=lambda x: None if x == 0xFF else x),
    3:  BaseType(name='int16', parse=lambda x: None if x == 0x7FFF else x),
    4:  BaseType(name='uint16', parse=lambda x: None if x == 0xFFFF else x),
    5:  BaseType(name='int32', parse=lambda x: None if x == 0x7FFFFFFF else x),
    6:  BaseType(name='uint32', parse=lambda x: None if x == 0xFFFFFFFF else x),
    7:  BaseType(name='string', parse=lambda x: x or None),
    8:  BaseType(name='float32', parse=lambda x: None if isnan(x) else x),
    9:  BaseType(name='float64', parse=lambda x: None if isnan(x) else x),
    10: BaseType(name='uint8z', parse=lambda x: None if x == 0x0 else x),
    11: BaseType(name='uint16z', parse=lambda x: None if x == 0x0 else x),
    12: BaseType(name='uint32z', parse=lambda x: None if x == 0x0 else x),
    13: BASE_TYPE_BYTE}

BASE_TYPES_BY_NAME = {bt.name: bt for bt in BASE_TYPES.values()}

BASE_TYPE_NAMES = tuple(BASE_TYPES[i].name for i in range(len(BASE_TYPES)))

TIMESTAMP_FIELD_NUM = 253
MESSAGE_INDEX_FIELD_NUM = 254


GLOBAL_MESG_NUMS = {
    0: 'file_id',
    1: 'capabilities',
    2: 'device_settings',
    3: 'user_profile',
    4: 'hrm_profile',
    5: 'sdm_profile',
    6: 'bike_profile',
    7: 'zones_target',
    8: 'hr_zone',
    9: 'power_zone',
    10: 'met_zone',
    12: 'sport',
    15: 'goal',
    18: 'session',
    19: 'lap',
    20: 'record',
    21: 'event',
    23: 'device_info',
    26: 'workout',
    27: 'workout_step',
    28: 'schedule',
    30: 'weight_scale',
    31: 'course',
    32: 'course_point',
    33: 'totals',
    34: 'activity',
    35: 'software',
    37: 'file_capabilities',
    38: 'mesg_capabilities',
    39: 'field_capabilities',
    49: 'file_creator',
    51: 'blood_pressure',
    53: 'speed_zone',
    55: 'monitoring',
    72: 'training_file',
    78: 'hrv',
    101: 'length',
    103: 'monitoring_info',
    105: 'pad',
    106: 'slave_device',
    131: 'cadence_zone',
    206: 'field_description',
    207: 'developer_data_id'}


TYPES = {
    'activity': {
        'base_type': 'enum',
        'values': {0: 'manual', 1: 'auto_multi_sport'}},
    'activity_class': {'base_type': 'enum', 'values': {}},
    'activity_level': {
        'base_type': 'enum',
        'values': {0: 'low', 1: 'medium', 2: 'high'}},
    'activity_type': {
        'base_type': 'enum',
        'values': {0: 'generic', 1: 'running', 2: 'cycling', 3: 'transition',
                   4: 'fitness_equipment', 5: 'swimming', 6: 'walking',
                   8: 'sedentary', 254: 'all'}},
    'ant_network': {
        'base_type': 'enum',
        'values': {0: 'public', 1: 'antplus', 2: 'antfs', 3: 'private'}},
    'antplus_device_type': {
        'base_type': 'uint8',
        'values': {1: 'antfs', 11: 'bike_power',
                   12: 'environment_sensor_legacy',
                   15: 'multi_sport_speed_distance', 16: 'control',
                   17: 'fitness_equipment', 18: 'blood_pressure',
                   19: 'geocache_node', 20: 'light_electric_vehicle',
                   25: 'env_sensor', 119: 'weight_scale', 120: 'heart_rate',
                   121: 'bike_speed_cadence', 122: 'bike_cadence',
                   123: 'bike_speed', 124: 'stride_speed_distance'}},
    'backlight_mode': {
        'base_type': 'enum',
        'values': {0: 'off', 1: 'manual', 2: 'key_and_messages',
                   3: 'auto_brightness', 4: 'smart_notifications',
                   5: 'key_and_messages_night',
                   6: 'key_and_messages_and_smart_notifications'}},
    'battery_status': {
        'base_type': 'uint8',
        'values': {1: 'new', 2: 'good', 3: 'ok', 4: 'low', 5: 'critical',
                   6: 'charging', 7: 'unknown'}},
    'body_location': {
        'base_type': 'enum',
        'values': {0: 'left_leg', 1: 'left_calf', 2: 'left_shin',
                   3: 'left_hamstring', 4: 'left_quad', 5: 'left_glute',
                   6: 'right_leg', 7: 'right_calf', 8: 'right_shin',
                   9: 'right_hamstring', 10: 'right_quad', 11: 'right_glute',
                   12: 'torso_back'}},
    'bool': {'base_type': 'enum', 'values': {0: 'false', 1: 'true'}},
    'bp_status': {
        'base_type': 'enum',
        'values': {0: 'no_error', 1: 'error_incomplete_data',
                   2: 'error_no_measurement', 3: 'error_data_out_of_range',
                   4: 'error_irregular_heart_rate'}},
    'connectivity_capabilities': {'base_type': 'uint32z', 'values': {}},
    'course_capabilities': {'base_type': 'uint32z', 'values': {}},
    'course_point': {
        'base_type': 'enum',
        'values': {0: 'generic', 1: 'summit', 2: 'valley', 3: 'water',
                   4: 'food', 5: 'danger', 6: 'left', 7: 'right',
                   8: 'straight', 9: 'first_aid', 10: 'fourth_category',
                   11: 'third_category', 12: 'second_category',
                   13: 'first_category', 14: 'hors_category', 15: 'sprint',
                   16: 'left_fork', 17: 'right_fork', 18: 'middle_fork',
                   19: 'slight_left', 20: 'sharp_left', 21: 'slight_right',
                   22: 'sharp_right', 23: 'u_turn'}},
    'date_mode': {
        'base_type': 'enum', 'values': {0: 'day_month', 1: 'month_day'}},
    'date_time': {'base_type': 'uint32', 'values': {}},
    'device_index': {'base_type': 'uint8', 'values': {0: 'creator'}},
    'display_heart': {
        'base_type': 'enum', 'values': {0: 'bpm', 1: 'max', 2: 'reserve'}},
    'display_measure': {
        'base_type': 'enum',
        'values': {0: 'metric', 1: 'statute', 2: 'nautical'}},
    'display_position': {
        'base_type': 'enum',
        'values': {0: 'degree', 1: 'degree_minute',
                   2: 'degree_minute_second', 3: 'austrian_grid'}},
    'display_power': {
        'base_type': 'enum', 'values': {0: 'watts', 1: 'percent_ftp'}},
    'event': {
        'base_type': 'enum',
        'values': {0: 'timer', 3: 'workout', 4: 'workout_step',
                   5: 'power_down', 6: 'power_up', 7: 'off_course',
                   8: 'session', 9: 'lap', 10: 'course_point',
                   11: 'battery', 12: 'virtual_partner_pace',
                   13: 'hr_high_alert', 14: 'hr_low_alert',
                   15: 'speed_high_alert', 16: 'speed_low_alert',
                   17: 'cad_high_alert', 18: 'cad_low_alert',
                   19: 'power_high_alert', 20: 'power_low_alert',
                   21: 'recovery_hr', 22: 'battery_low',
                   23: 'time_duration_alert', 24: 'distance_duration_alert',
                   25: 'calorie_duration_alert', 26: 'activity',
                   27: 'fitness_equipment', 28: 'length',
                   36: 'calibration'}},
    'event_type': {
        'base_type': 'enum',
        'values': {0: 'start', 1: 'stop', 2: 'consecutive_deprecated',
                   3: 'marker', 4: 'stop_all', 5: 'begin_deprecated',
                   6: 'end_deprecated', 7: 'end_all_deprecated',
                   8: 'stop_disable', 9: 'stop_disable_all'}},
    'file': {
        'base_type': 'enum',
        'values': {1: 'device', 2: 'settings', 3: 'sport', 4: 'activity',
                   5: 'workout', 6: 'course', 7: 'schedules', 9: 'weight',
                   10: 'totals', 11: 'goals', 14: 'blood_pressure',
                   15: 'monitoring_a', 20: 'activity_summary',
                   28: 'monitoring_daily', 32: 'monitoring_b'}},
    'file_flags': {'base_type': 'uint8z', 'values': {}},
    'gender': {'base_type': 'enum', 'values': {0: 'female', 1: 'male'}},
    'goal': {
        'base_type': 'enum',
        'values': {0: 'time', 1: 'distance', 2: 'calories', 3: 'frequency',
                   4: 'steps', 5: 'ascent', 6: 'active_minutes'}},
    'goal_recurrence': {
        'base_type': 'enum',
        'values': {0: 'off', 1: 'daily', 2: 'weekly', 3: 'monthly',
                   4: 'yearly', 5: 'custom'}},
    'goal_source': {
        'base_type': 'enum',
        'values': {0: 'auto', 1: 'community', 2: 'user'}},
    'hr_type': {
        'base_type': 'enum', 'values': {0: 'normal', 1: 'irregular'}},
    'hr_zone_calc': {
        'base_type': 'enum',
        'values': {0: 'custom', 1: 'percent_max_hr', 2: 'percent_hrr'}},
    'intensity': {
        'base_type': 'enum',
        'values': {0: 'active', 1: 'rest', 2: 'warmup', 3: 'cooldown'}},
    'language': {
        'base_type': 'enum',
        'values': {0: 'english', 1: 'french', 2: 'italian', 3: 'german',
                   4: 'spanish', 5: 'croatian', 6: 'czech', 7: 'danish',
                   8: 'dutch', 9: 'finnish', 10: 'greek', 11: 'hungarian',
                   12: 'norwegian', 13: 'polish', 14: 'portuguese',
                   15: 'slovakian', 16: 'slovenian', 17: 'swedish',
                   18: 'russian', 19: 'turkish', 20: 'latvian',
                   21: 'ukrainian', 22: 'arabic', 23: 'farsi',
                   24: 'bulgarian', 25: 'romanian', 254: 'custom'}},
    'lap_trigger': {
        'base_type': 'enum',
        'values': {0: 'manual', 1: 'time', 2: 'distance',
                   3: 'position_start', 4: 'position_lap',
                   5: 'position_waypoint', 6: 'position_marked',
                   7: 'session_end', 8: 'fitness_equipment'}},
    'left_right_balance': {'base_type': 'uint8', 'values': {}},
    'left_right_balance_100': {'base_type': 'uint16', 'values': {}},
    'length_type': {'base_type': 'enum', 'values': {0: 'idle', 1: 'active'}},
    'local_date_time': {'base_type': 'uint32', 'values': {}},
    'manufacturer': {
        'base_type': 'uint16',
        'values': {1: 'garmin', 2: 'garmin_fr405_antfs', 3: 'zephyr',
                   4: 'dayton', 5: 'idt', 6: 'srm', 7: 'quarq', 8: 'ibike',
                   9: 'saris', 10: 'spark_hk', 11: 'tanita', 12: 'echowell',
                   13: 'dynastream_oem', 14: 'nautilus', 15: 'dynastream',
                   16: 'timex', 17: 'metrigear', 18: 'xelic', 19: 'beurer',
                   20: 'cardiosport', 21: 'a_and_d', 22: 'hmm',
                   23: 'suunto', 24: 'thita_elektronik', 25: 'gpulse',
                   26: 'clean_mobile', 27: 'pedal_brain', 28: 'peaksware',
                   29: 'saxonar', 30: 'lemond_fitness', 31: 'dexcom',
                   32: 'wahoo_fitness', 33: 'octane_fitness',
                   34: 'archinoetics', 35: 'the_hurt_box',
                   36: 'citizen_systems', 37: 'magellan', 38: 'osynce',
                   39: 'holux', 40: 'concept2', 255: 'development'}},
    'mesg_count': {
        'base_type': 'enum',
        'values': {0: 'num_per_file', 1: 'max_per_file',
                   2: 'max_per_file_type'}},
    'mesg_num': {'base_type': 'uint16', 'values': GLOBAL_MESG_NUMS},
    'message_index': {'base_type': 'uint16', 'values': {}},
    'pwr_zone_calc': {
        'base_type': 'enum', 'values': {0: 'custom', 1: 'percent_ftp'}},
    'schedule': {'base_type': 'enum', 'values': {0: 'workout', 1: 'course'}},
    'session_trigger': {
        'base_type': 'enum',
        'values': {0: 'activity_end', 1: 'manual', 2: 'auto_multi_sport',
                   3: 'fitness_equipment'}},
    'side': {'base_type': 'enum', 'values': {0: 'right', 1: 'left'}},
    'source_type': {
        'base_type': 'enum',
        'values': {0: 'ant', 1: 'antplus', 2: 'bluetooth',
                   3: 'bluetooth_low_energy', 4: 'wifi', 5: 'local'}},
    'sport': {
        'base_type': 'enum',
        'values': {0: 'generic', 1: 'running', 2: 'cycling', 3: 'transition',
                   4: 'fitness_equipment', 5: 'swimming', 6: 'basketball',
                   7: 'soccer', 8: 'tennis', 9: 'american_football',
                   10: 'training', 11: 'walking', 12: 'cross_country_skiing',
                   13: 'alpine_skiing', 14: 'snowboarding', 15: 'rowing',
                   16: 'mountaineering', 17: 'hiking', 18: 'multisport',
                   19: 'paddling', 254: 'all'}},
    'sport_bits_0': {'base_type': 'uint8z', 'values': {}},
    'stroke_type': {
        'base_type': 'enum',
        'values': {0: 'no_event', 1: 'other', 2: 'serve', 3: 'forehand',
                   4: 'backhand', 5: 'smash'}},
    'sub_sport': {
        'base_type': 'enum',
        'values': {0: 'generic', 1: 'treadmill', 2: 'street', 3: 'trail',
                   4: 'track', 5: 'spin', 6: 'indoor_cycling', 7: 'road',
                   8: 'mountain', 9: 'downhill', 10: 'recumbent',
                   11: 'cyclocross', 12: 'hand_cycling', 13: 'track_cycling',
                   14: 'indoor_rowing', 15: 'elliptical',
                   16: 'stair_climbing', 17: 'lap_swimming',
                   18: 'open_water', 19: 'flexibility_training',
                   20: 'strength_training', 21: 'warm_up', 22: 'match',
                   23: 'exercise', 24: 'challenge', 25: 'indoor_skiing',
                   26: 'cardio_training', 254: 'all'}},
    'swim_stroke': {
        'base_type': 'enum',
        'values': {0: 'freestyle', 1: 'backstroke', 2: 'breaststroke',
                   3: 'butterfly', 4: 'drill', 5: 'mixed', 6: 'im'}},
    'time_mode': {
        'base_type': 'enum',
        'values': {0: 'hour12', 1: 'hour24', 2: 'military',
                   3: 'hour_12_with_seconds', 4: 'hour_24_with_seconds',
                   5: 'utc'}},
    'user_local_id': {'base_type': 'uint16', 'values': {}},
    'weight': {'base_type': 'uint16', 'values': {}},
    'wkt_step_duration': {
        'base_type': 'enum',
        'values': {0: 'time', 1: 'distance', 2: 'hr_less_than',
                   3: 'hr_greater_than', 4: 'calories', 5: 'open',
                   6: 'repeat_until_steps_cmplt', 7: 'repeat_until_time',
                   8: 'repeat_until_distance', 9: 'repeat_until_calories',
                   10: 'repeat_until_hr_less_than',
                   11: 'repeat_until_hr_greater_than',
                   12: 'repeat_until_power_less_than',
                   13: 'repeat_until_power_greater_than',
                   14: 'power_less_than', 15: 'power_greater_than',
                   28: 'repetition_time'}},
    'wkt_step_target': {
        'base_type': 'enum',
        'values': {0: 'speed', 1: 'heart_rate', 2: 'open', 3: 'cadence',
                   4: 'power', 5: 'grade', 6: 'resistance'}},
    'workout_capabilities': {'base_type': 'uint32z', 'values': {}},
    'workout_equipment': {
        'base_type': 'enum',
        'values': {0: 'none', 1: 'swim_fins', 2: 'swim_kickboard',
                   3: 'swim_paddles', 4: 'swim_pull_buoy',
                   5: 'swim_snorkel'}}}

TYPES_INFO = {name: info['values'] for name, info in TYPES.items()}


MESSAGE_TYPES = {
    'file_id': {
        0: {'field_name': 'type', 'field_type': 'file'},
        1: {'field_name': 'manufacturer', 'field_type': 'manufacturer'},
        2: {'field_name': 'product', 'field_type': 'uint16'},
        3: {'field_name': 'serial_number', 'field_type': 'uint32z'},
        4: {'field_name': 'time_created', 'field_type': 'date_time'},
        5: {'field_name': 'number', 'field_type': 'uint16'},
        8: {'field_name': 'product_name', 'field_type': 'string'}},
    'capabilities': {
        0: {'field_name': 'languages', 'field_type': 'uint8z'},
        1: {'field_name': 'sports', 'field_type': 'sport_bits_0'},
        21: {'field_name': 'workouts_supported',
             'field_type': 'workout_capabilities'},
        23: {'field_name': 'connectivity_supported',
             'field_type': 'connectivity_capabilities'}},
    'device_settings': {
        0: {'field_name': 'active_time_zone', 'field_type': 'uint8'},
        1: {'field_name': 'utc_offset', 'field_type': 'uint32'},
        2: {'field_name': 'time_offset', 'field_type': 'uint32',
            'units': 's'},
        4: {'field_name': 'time_mode', 'field_type': 'time_mode'},
        5: {'field_name': 'time_zone_offset', 'field_type': 'int8',
            'scale': 4, 'units': 'hr'},
        12: {'field_name': 'backlight_mode', 'field_type': 'backlight_mode'},
        36: {'field_name': 'activity_tracker_enabled', 'field_type': 'bool'},
        39: {'field_name': 'clock_time', 'field_type': 'date_time'},
        40: {'field_name': 'pages_enabled', 'field_type': 'uint16'},
        46: {'field_name': 'move_alert_enabled', 'field_type': 'bool'},
        47: {'field_name': 'date_mode', 'field_type': 'date_mode'},
        56: {'field_name': 'mounting_side', 'field_type': 'side'},
        57: {'field_name': 'default_page', 'field_type': 'uint16'},
        58: {'field_name': 'autosync_min_steps', 'field_type': 'uint16',
             'units': 'steps'},
        59: {'field_name': 'autosync_min_time', 'field_type': 'uint16',
             'units': 'minutes'}},
    'user_profile': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'friendly_name', 'field_type': 'string'},
        1: {'field_name': 'gender', 'field_type': 'gender'},
        2: {'field_name': 'age', 'field_type': 'uint8', 'units': 'years'},
        3: {'field_name': 'height', 'field_type': 'uint8', 'scale': 100,
            'units': 'm'},
        4: {'field_name': 'weight', 'field_type': 'uint16', 'scale': 10,
            'units': 'kg'},
        5: {'field_name': 'language', 'field_type': 'language'},
        6: {'field_name': 'elev_setting', 'field_type': 'display_measure'},
        7: {'field_name': 'weight_setting', 'field_type': 'display_measure'},
        8: {'field_name': 'resting_heart_rate', 'field_type': 'uint8',
            'units': 'bpm'},
        9: {'field_name': 'default_max_running_heart_rate',
            'field_type': 'uint8', 'units': 'bpm'},
        10: {'field_name': 'default_max_biking_heart_rate',
             'field_type': 'uint8', 'units': 'bpm'},
        11: {'field_name': 'default_max_heart_rate', 'field_type': 'uint8',
             'units': 'bpm'},
        12: {'field_name': 'hr_setting', 'field_type': 'display_heart'},
        13: {'field_name': 'speed_setting', 'field_type': 'display_measure'},
        14: {'field_name': 'dist_setting', 'field_type': 'display_measure'},
        16: {'field_name': 'power_setting', 'field_type': 'display_power'},
        17: {'field_name': 'activity_class', 'field_type': 'activity_class'},
        18: {'field_name': 'position_setting',
             'field_type': 'display_position'},
        21: {'field_name': 'temperature_setting',
             'field_type': 'display_measure'},
        22: {'field_name': 'local_id', 'field_type': 'user_local_id'},
        23: {'field_name': 'global_id', 'field_type': 'byte'},
        30: {'field_name': 'height_setting',
             'field_type': 'display_measure'}},
    'hrm_profile': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'enabled', 'field_type': 'bool'},
        1: {'field_name': 'hrm_ant_id', 'field_type': 'uint16z'},
        2: {'field_name': 'log_hrv', 'field_type': 'bool'},
        3: {'field_name': 'hrm_ant_id_trans_type', 'field_type': 'uint8z'}},
    'sdm_profile': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'enabled', 'field_type': 'bool'},
        1: {'field_name': 'sdm_ant_id', 'field_type': 'uint16z'},
        2: {'field_name': 'sdm_cal_factor', 'field_type': 'uint16',
            'scale': 10, 'units': '%'},
        3: {'field_name': 'odometer', 'field_type': 'uint32', 'scale': 100,
            'units': 'm'},
        4: {'field_name': 'speed_source', 'field_type': 'bool'},
        5: {'field_name': 'sdm_ant_id_trans_type', 'field_type': 'uint8z'},
        7: {'field_name': 'odometer_rollover', 'field_type': 'uint8'}},
    'bike_profile': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'name', 'field_type': 'string'},
        1: {'field_name': 'sport', 'field_type': 'sport'},
        2: {'field_name': 'sub_sport', 'field_type': 'sub_sport'},
        3: {'field_name': 'odometer', 'field_type': 'uint32', 'scale': 100,
            'units': 'm'},
        4: {'field_name': 'bike_spd_ant_id', 'field_type': 'uint16z'},
        5: {'field_name': 'bike_cad_ant_id', 'field_type': 'uint16z'},
        6: {'field_name': 'bike_spdcad_ant_id', 'field_type': 'uint16z'},
        7: {'field_name': 'bike_power_ant_id', 'field_type': 'uint16z'},
        8: {'field_name': 'custom_wheelsize', 'field_type': 'uint16',
            'scale': 1000, 'units': 'm'},
        9: {'field_name': 'auto_wheelsize', 'field_type': 'uint16',
            'scale': 1000, 'units': 'm'},
        10: {'field_name': 'bike_weight', 'field_type': 'uint16',
             'scale': 10, 'units': 'kg'},
        11: {'field_name': 'power_cal_factor', 'field_type': 'uint16',
             'scale': 10, 'units': '%'},
        12: {'field_name': 'auto_wheel_cal', 'field_type': 'bool'},
        13: {'field_name': 'auto_power_zero', 'field_type': 'bool'},
        14: {'field_name': 'id', 'field_type': 'uint8'},
        15: {'field_name': 'spd_enabled', 'field_type': 'bool'},
        16: {'field_name': 'cad_enabled', 'field_type': 'bool'},
        17: {'field_name': 'spdcad_enabled', 'field_type': 'bool'},
        18: {'field_name': 'power_enabled', 'field_type': 'bool'},
        19: {'field_name': 'crank_length', 'field_type': 'uint8',
             'scale': 2, 'offset': -110, 'units': 'mm'},
        20: {'field_name': 'enabled', 'field_type': 'bool'},
        21: {'field_name': 'bike_spd_ant_id_trans_type',
             'field_type': 'uint8z'},
        22: {'field_name': 'bike_cad_ant_id_trans_type',
             'field_type': 'uint8z'},
        23: {'field_name': 'bike_spdcad_ant_id_trans_type',
             'field_type': 'uint8z'},
        24: {'field_name': 'bike_power_ant_id_trans_type',
             'field_type': 'uint8z'},
        37: {'field_name': 'odometer_rollover', 'field_type': 'uint8'},
        38: {'field_name': 'front_gear_num', 'field_type': 'uint8z'},
        39: {'field_name': 'front_gear', 'field_type': 'uint8z'},
        40: {'field_name': 'rear_gear_num', 'field_type': 'uint8z'},
        41: {'field_name': 'rear_gear', 'field_type': 'uint8z'},
        44: {'field_name': 'shimano_di2_enabled', 'field_type': 'bool'}},
    'zones_target': {
        1: {'field_name': 'max_heart_rate', 'field_type': 'uint8'},
        2: {'field_name': 'threshold_heart_rate', 'field_type': 'uint8'},
        3: {'field_name': 'functional_threshold_power',
            'field_type': 'uint16'},
        5: {'field_name': 'hr_calc_type', 'field_type': 'hr_zone_calc'},
        7: {'field_name': 'pwr_calc_type', 'field_type': 'pwr_zone_calc'}},
    'hr_zone': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        1: {'field_name': 'high_bpm', 'field_type': 'uint8', 'units': 'bpm'},
        2: {'field_name': 'name', 'field_type': 'string'}},
    'power_zone': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        1: {'field_name': 'high_value', 'field_type': 'uint16',
            'units': 'watts'},
        2: {'field_name': 'name', 'field_type': 'string'}},
    'met_zone': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        1: {'field_name': 'high_bpm', 'field_type': 'uint8'},
        2: {'field_name': 'calories', 'field_type': 'uint16', 'scale': 10,
            'units': 'kcal / min'},
        3: {'field_name': 'fat_calories', 'field_type': 'uint8', 'scale': 10,
            'units': 'kcal / min'}},
    'sport': {
        0: {'field_name': 'sport', 'field_type': 'sport'},
        1: {'field_name': 'sub_sport', 'field_type': 'sub_sport'},
        3: {'field_name': 'name', 'field_type': 'string'}},
    'goal': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'sport', 'field_type': 'sport'},
        1: {'field_name': 'sub_sport', 'field_type': 'sub_sport'},
        2: {'field_name': 'start_date', 'field_type': 'date_time'},
        3: {'field_name': 'end_date', 'field_type': 'date_time'},
        4: {'field_name': 'type', 'field_type': 'goal'},
        5: {'field_name': 'value', 'field_type': 'uint32'},
        6: {'field_name': 'repeat', 'field_type': 'bool'},
        7: {'field_name': 'target_value', 'field_type': 'uint32'},
        8: {'field_name': 'recurrence', 'field_type': 'goal_recurrence'},
        9: {'field_name': 'recurrence_value', 'field_type': 'uint16'},
        10: {'field_name': 'enabled', 'field_type': 'bool'},
        11: {'field_name': 'source', 'field_type': 'goal_source'}},
    'session': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'event', 'field_type': 'event'},
        1: {'field_name': 'event_type', 'field_type': 'event_type'},
        2: {'field_name': 'start_time', 'field_type': 'date_time'},
        3: {'field_name': 'start_position_lat', 'field_type': 'int32',
            'units': 'semicircles'},
        4: {'field_name': 'start_position_long', 'field_type': 'int32',
            'units': 'semicircles'},
        5: {'field_name': 'sport', 'field_type': 'sport'},
        6: {'field_name': 'sub_sport', 'field_type': 'sub_sport'},
        7: {'field_name': 'total_elapsed_time', 'field_type': 'uint32',
            'scale': 1000, 'units': 's'},
        8: {'field_name': 'total_timer_time', 'field_type': 'uint32',
            'scale': 1000, 'units': 's'},
        9: {'field_name': 'total_distance', 'field_type': 'uint32',
            'scale': 100, 'units': 'm'},
        10: {'field_name': 'total_cycles', 'field_type': 'uint32',
             'units': 'cycles'},
        11: {'field_name': 'total_calories', 'field_type': 'uint16',
             'units': 'kcal'},
        13: {'field_name': 'total_fat_calories', 'field_type': 'uint16',
             'units': 'kcal'},
        14: {'field_name': 'avg_speed', 'field_type': 'uint16',
             'scale': 1000, 'units': 'm/s'},
        15: {'field_name': 'max_speed', 'field_type': 'uint16',
             'scale': 1000, 'units': 'm/s'},
        16: {'field_name': 'avg_heart_rate', 'field_type': 'uint8',
             'units': 'bpm'},
        17: {'field_name': 'max_heart_rate', 'field_type': 'uint8',
             'units': 'bpm'},
        18: {'field_name': 'avg_cadence', 'field_type': 'uint8',
             'units': 'rpm'},
        19: {'field_name': 'max_cadence', 'field_type': 'uint8',
             'units': 'rpm'},
        20: {'field_name': 'avg_power', 'field_type': 'uint16',
             'units': 'watts'},
        21: {'field_name': 'max_power', 'field_type': 'uint16',
             'units': 'watts'},
        22: {'field_name': 'total_ascent', 'field_type': 'uint16',
             'units': 'm'},
        23: {'field_name': 'total_descent', 'field_type': 'uint16',
             'units': 'm'},
        24: {'field_name': 'total_training_effect', 'field_type': 'uint8',
             'scale': 10},
        25: {'field_name': 'first_lap_index', 'field_type': 'uint16'},
        26: {'field_name': 'num_laps', 'field_type': 'uint16'},
        27: {'field_name': 'event_group', 'field_type': 'uint8'},
        28: {'field_name': 'trigger', 'field_type': 'session_trigger'},
        29: {'field_name': 'nec_lat', 'field_type': 'int32',
             'units': 'semicircles'},
        30: {'field_name': 'nec_long', 'field_type': 'int32',
             'units': 'semicircles'},
        31: {'field_name': 'swc_lat', 'field_type': 'int32',
             'units': 'semicircles'},
        32: {'field_name': 'swc_long', 'field_type': 'int32',
             'units': 'semicircles'},
        34: {'field_name': 'normalized_power', 'field_type': 'uint16',
             'units': 'watts'},
        35: {'field_name': 'training_stress_score', 'field_type': 'uint16',
             'scale': 10, 'units': 'tss'},
        36: {'field_name': 'intensity_factor', 'field_type': 'uint16',
             'scale': 1000, 'units': 'if'},
        37: {'field_name': 'left_right_balance',
             'field_type': 'left_right_balance_100'},
        41: {'field_name': 'avg_stroke_count', 'field_type': 'uint32',
             'scale': 10, 'units': 'strokes/lap'},
        42: {'field_name': 'avg_stroke_distance', 'field_type': 'uint16',
             'scale': 100, 'units': 'm'},
        43: {'field_name': 'swim_stroke', 'field_type': 'swim_stroke'},
        44: {'field_name': 'pool_length', 'field_type': 'uint16',
             'scale': 100, 'units': 'm'},
        45: {'field_name': 'threshold_power', 'field_type': 'uint16',
             'units': 'watts'},
        46: {'field_name': 'pool_length_unit',
             'field_type': 'display_measure'},
        47: {'field_name': 'num_active_lengths', 'field_type': 'uint16',
             'units': 'lengths'},
        48: {'field_name': 'total_work', 'field_type': 'uint32',
             'units': 'J'},
        49: {'field_name': 'avg_altitude', 'field_type': 'uint16',
             'scale': 5, 'offset': 500, 'units': 'm'},
        50: {'field_name': 'max_altitude', 'field_type': 'uint16',
             'scale': 5, 'offset': 500, 'units': 'm'},
        51: {'field_name': 'gps_accuracy', 'field_type': 'uint8',
             'units': 'm'},
        52: {'field_name': 'avg_grade', 'field_type': 'int16', 'scale': 100,
             'units': '%'},
        53: {'field_name': 'avg_pos_grade', 'field_type': 'int16',
             'scale': 100, 'units': '%'},
        54: {'field_name': 'avg_neg_grade', 'field_type': 'int16',
             'scale': 100, 'units': '%'},
        55: {'field_name': 'max_pos_grade', 'field_type': 'int16',
             'scale': 100, 'units': '%'},
        56: {'field_name': 'max_neg_grade', 'field_type': 'int16',
             'scale': 100, 'units': '%'},
        57: {'field_name': 'avg_temperature', 'field_type': 'int8',
             'units': 'C'},
        58: {'field_name': 'max_temperature', 'field_type': 'int8',
             'units': 'C'},
        59: {'field_name': 'total_moving_time', 'field_type': 'uint32',
             'scale': 1000, 'units': 's'},
        60: {'field_name': 'avg_pos_vertical_speed', 'field_type': 'int16',
             'scale': 1000, 'units': 'm/s'},
        61: {'field_name': 'avg_neg_vertical_speed', 'field_type': 'int16',
             'scale': 1000, 'units': 'm/s'},
        62: {'field_name': 'max_pos_vertical_speed', 'field_type': 'int16',
             'scale': 1000, 'units': 'm/s'},
        63: {'field_name': 'max_neg_vertical_speed', 'field_type': 'int16',
             'scale': 1000, 'units': 'm/s'},
        64: {'field_name': 'min_heart_rate', 'field_type': 'uint8',
             'units': 'bpm'},
        69: {'field_name': 'avg_lap_time', 'field_type': 'uint32',
             'scale': 1000, 'units': 's'},
        70: {'field_name': 'best_lap_index', 'field_type': 'uint16'},
        71: {'field_name': 'min_altitude', 'field_type': 'uint16',
             'scale': 5, 'offset': 500, 'units': 'm'},
        82: {'field_name': 'player_score', 'field_type': 'uint16'},
        83: {'field_name': 'opponent_score', 'field_type': 'uint16'},
        84: {'field_name': 'opponent_name', 'field_type': 'string'},
        89: {'field_name': 'avg_vertical_oscillation', 'field_type': 'uint16',
             'scale': 10, 'units': 'mm'},
        92: {'field_name': 'avg_fractional_cadence', 'field_type': 'uint8',
             'scale': 128, 'units': 'rpm'},
        93: {'field_name': 'max_fractional_cadence', 'field_type': 'uint8',
             'scale': 128, 'units': 'rpm'},
        94: {'field_name': 'total_fractional_cycles', 'field_type': 'uint8',
             'scale': 128, 'units': 'cycles'},
        110: {'field_name': 'sport_profile_name', 'field_type': 'string'},
        111: {'field_name': 'sport_index', 'field_type': 'uint8'},
        124: {'field_name': 'enhanced_avg_speed', 'field_type': 'uint32',
              'scale': 1000, 'units': 'm/s'},
        125: {'field_name': 'enhanced_max_speed', 'field_type': 'uint32',
              'scale': 1000, 'units': 'm/s'},
        126: {'field_name': 'enhanced_avg_altitude', 'field_type': 'uint32',
              'scale': 5, 'offset': 500, 'units': 'm'},
        127: {'field_name': 'enhanced_min_altitude', 'field_type': 'uint32',
              'scale': 5, 'offset': 500, 'units': 'm'},
        128: {'field_name': 'enhanced_max_altitude', 'field_type': 'uint32',
              'scale': 5, 'offset': 500, 'units': 'm'}},
    'lap': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'event', 'field_type': 'event'},
        1: {'field_name': 'event_type', 'field_type': 'event_type'},
        2: {'field_name': 'start_time', 'field_type': 'date_time'},
        3: {'field_name': 'start_position_lat', 'field_type': 'int32',
            'units': 'semicircles'},
        4: {'field_name': 'start_position_long', 'field_type': 'int32',
            'units': 'semicircles'},
        5: {'field_name': 'end_position_lat', 'field_type': 'int32',
            'units': 'semicircles'},
        6: {'field_name': 'end_position_long', 'field_type': 'int32',
            'units': 'semicircles'},
        7: {'field_name': 'total_elapsed_time', 'field_type': 'uint32',
            'scale': 1000, 'units': 's'},
        8: {'field_name': 'total_timer_time', 'field_type': 'uint32',
            'scale': 1000, 'units': 's'},
        9: {'field_name': 'total_distance', 'field_type': 'uint32',
            'scale': 100, 'units': 'm'},
        10: {'field_name': 'total_cycles', 'field_type': 'uint32',
             'units': 'cycles'},
        11: {'field_name': 'total_calories', 'field_type': 'uint16',
             'units': 'kcal'},
        12: {'field_name': 'total_fat_calories', 'field_type': 'uint16',
             'units': 'kcal'},
        13: {'field_name': 'avg_speed', 'field_type': 'uint16',
             'scale': 1000, 'units': 'm/s'},
        14: {'field_name': 'max_speed', 'field_type': 'uint16',
             'scale': 1000, 'units': 'm/s'},
        15: {'field_name': 'avg_heart_rate', 'field_type': 'uint8',
             'units': 'bpm'},
        16: {'field_name': 'max_heart_rate', 'field_type': 'uint8',
             'units': 'bpm'},
        17: {'field_name': 'avg_cadence', 'field_type': 'uint8',
             'units': 'rpm'},
        18: {'field_name': 'max_cadence', 'field_type': 'uint8',
             'units': 'rpm'},
        19: {'field_name': 'avg_power', 'field_type': 'uint16',
             'units': 'watts'},
        20: {'field_name': 'max_power', 'field_type': 'uint16',
             'units': 'watts'},
        21: {'field_name': 'total_ascent', 'field_type': 'uint16',
             'units': 'm'},
        22: {'field_name': 'total_descent', 'field_type': 'uint16',
             'units': 'm'},
        23: {'field_name': 'intensity', 'field_type': 'intensity'},
        24: {'field_name': 'lap_trigger', 'field_type': 'lap_trigger'},
        25: {'field_name': 'sport', 'field_type': 'sport'},
        26: {'field_name': 'event_group', 'field_type': 'uint8'},
        32: {'field_name': 'num_lengths', 'field_type': 'uint16',
             'units': 'lengths'},
        33: {'field_name': 'normalized_power', 'field_type': 'uint16',
             'units': 'watts'},
        34: {'field_name': 'left_right_balance',
             'field_type': 'left_right_balance_100'},
        35: {'field_name': 'first_length_index', 'field_type': 'uint16'},
        37: {'field_name': 'avg_stroke_distance', 'field_type': 'uint16',
             'scale': 100, 'units': 'm'},
        38: {'field_name': 'swim_stroke', 'field_type': 'swim_stroke'},
        39: {'field_name': 'sub_sport', 'field_type': 'sub_sport'},
        40: {'field_name': 'num_active_lengths', 'field_type': 'uint16',
             'units': 'lengths'},
        41: {'field_name': 'total_work', 'field_type': 'uint32',
             'units': 'J'},
        42: {'field_name': 'avg_altitude', 'field_type': 'uint16',
             'scale': 5, 'offset': 500, 'units': 'm'},
        43: {'field_name': 'max_altitude', 'field_type': 'uint16',
             'scale': 5, 'offset': 500, 'units': 'm'},
        44: {'field_name': 'gps_accuracy', 'field_type': 'uint8',
             'units': 'm'},
        45: {'field_name': 'avg_grade', 'field_type': 'int16', 'scale': 100,
             'units': '%'},
        46: {'field_name': 'avg_pos_grade', 'field_type': 'int16',
             'scale': 100, 'units': '%'},
        47: {'field_name': 'avg_neg_grade', 'field_type': 'int16',
             'scale': 100, 'units': '%'},
        48: {'field_name': 'max_pos_grade', 'field_type': 'int16',
             'scale': 100, 'units': '%'},
        49: {'field_name': 'max_neg_grade', 'field_type': 'int16',
             'scale': 100, 'units': '%'},
        50: {'field_name': 'avg_temperature', 'field_type': 'int8',
             'units': 'C'},
        51: {'field_name': 'max_temperature', 'field_type': 'int8',
             'units': 'C'},
        52: {'field_name': 'total_moving_time', 'field_type': 'uint32',
             'scale': 1000, 'units': 's'},
        53: {'field_name': 'avg_pos_vertical_speed', 'field_type': 'int16',
             'scale': 1000, 'units': 'm/s'},
        54: {'field_name': 'avg_neg_vertical_speed', 'field_type': 'int16',
             'scale': 1000, 'units': 'm/s'},
        55: {'field_name': 'max_pos_vertical_speed', 'field_type': 'int16',
             'scale': 1000, 'units': 'm/s'},
        56: {'field_name': 'max_neg_vertical_speed', 'field_type': 'int16',
             'scale': 1000, 'units': 'm/s'},
        62: {'field_name': 'min_altitude', 'field_type': 'uint16',
             'scale': 5, 'offset': 500, 'units': 'm'},
        63: {'field_name': 'min_heart_rate', 'field_type': 'uint8',
             'units': 'bpm'},
        71: {'field_name': 'wkt_step_index', 'field_type': 'message_index'},
        74: {'field_name': 'opponent_score', 'field_type': 'uint16'},
        75: {'field_name': 'stroke_count', 'field_type': 'uint16',
             'units': 'counts'},
        76: {'field_name': 'zone_count', 'field_type': 'uint16',
             'units': 'counts'},
        77: {'field_name': 'avg_vertical_oscillation', 'field_type': 'uint16',
             'scale': 10, 'units': 'mm'},
        80: {'field_name': 'player_score', 'field_type': 'uint16'},
        110: {'field_name': 'enhanced_avg_speed', 'field_type': 'uint32',
              'scale': 1000, 'units': 'm/s'},
        111: {'field_name': 'enhanced_max_speed', 'field_type': 'uint32',
              'scale': 1000, 'units': 'm/s'},
        112: {'field_name': 'enhanced_avg_altitude', 'field_type': 'uint32',
              'scale': 5, 'offset': 500, 'units': 'm'},
        113: {'field_name': 'enhanced_min_altitude', 'field_type': 'uint32',
              'scale': 5, 'offset': 500, 'units': 'm'},
        114: {'field_name': 'enhanced_max_altitude', 'field_type': 'uint32',
              'scale': 5, 'offset': 500, 'units': 'm'}},
    'record': {
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'position_lat', 'field_type': 'int32',
            'units': 'semicircles'},
        1: {'field_name': 'position_long', 'field_type': 'int32',
            'units': 'semicircles'},
        2: {'field_name': 'altitude', 'field_type': 'uint16', 'scale': 5,
            'offset': 500, 'units': 'm'},
        3: {'field_name': 'heart_rate', 'field_type': 'uint8',
            'units': 'bpm'},
        4: {'field_name': 'cadence', 'field_type': 'uint8', 'units': 'rpm'},
        5: {'field_name': 'distance', 'field_type': 'uint32', 'scale': 100,
            'units': 'm'},
        6: {'field_name': 'speed', 'field_type': 'uint16', 'scale': 1000,
            'units': 'm/s'},
        7: {'field_name': 'power', 'field_type': 'uint16', 'units': 'watts'},
        8: {'field_name': 'compressed_speed_distance', 'field_type': 'byte'},
        9: {'field_name': 'grade', 'field_type': 'int16', 'scale': 100,
            'units': '%'},
        10: {'field_name': 'resistance', 'field_type': 'uint8'},
        11: {'field_name': 'time_from_course', 'field_type': 'int32',
             'scale': 1000, 'units': 's'},
        12: {'field_name': 'cycle_length', 'field_type': 'uint8',
             'scale': 100, 'units': 'm'},
        13: {'field_name': 'temperature', 'field_type': 'int8',
             'units': 'C'},
        17: {'field_name': 'speed_1s', 'field_type': 'uint8', 'scale': 16,
             'units': 'm/s'},
        18: {'field_name': 'cycles', 'field_type': 'uint8',
             'units': 'cycles', 'accumulate': True},
        19: {'field_name': 'total_cycles', 'field_type': 'uint32',
             'units': 'cycles'},
        28: {'field_name': 'compressed_accumulated_power',
             'field_type': 'uint16', 'units': 'watts', 'accumulate': True},
        29: {'field_name': 'accumulated_power', 'field_type': 'uint32',
             'units': 'watts'},
        30: {'field_name': 'left_right_balance',
             'field_type': 'left_right_balance'},
        31: {'field_name': 'gps_accuracy', 'field_type': 'uint8',
             'units': 'm'},
        32: {'field_name': 'vertical_speed', 'field_type': 'int16',
             'scale': 1000, 'units': 'm/s'},
        33: {'field_name': 'calories', 'field_type': 'uint16',
             'units': 'kcal'},
        39: {'field_name': 'vertical_oscillation', 'field_type': 'uint16',
             'scale': 10, 'units': 'mm'},
        40: {'field_name': 'stance_time_percent', 'field_type': 'uint16',
             'scale': 100, 'units': 'percent'},
        41: {'field_name': 'stance_time', 'field_type': 'uint16',
             'scale': 10, 'units': 'ms'},
        42: {'field_name': 'activity_type', 'field_type': 'activity_type'},
        43: {'field_name': 'left_torque_effectiveness',
             'field_type': 'uint8', 'scale': 2, 'units': 'percent'},
        44: {'field_name': 'right_torque_effectiveness',
             'field_type': 'uint8', 'scale': 2, 'units': 'percent'},
        45: {'field_name': 'left_pedal_smoothness', 'field_type': 'uint8',
             'scale': 2, 'units': 'percent'},
        46: {'field_name': 'right_pedal_smoothness', 'field_type': 'uint8',
             'scale': 2, 'units': 'percent'},
        47: {'field_name': 'combined_pedal_smoothness',
             'field_type': 'uint8', 'scale': 2, 'units': 'percent'},
        48: {'field_name': 'time128', 'field_type': 'uint8', 'scale': 128,
             'units': 's'},
        49: {'field_name': 'stroke_type', 'field_type': 'stroke_type'},
        50: {'field_name': 'zone', 'field_type': 'uint8'},
        51: {'field_name': 'ball_speed', 'field_type': 'uint16',
             'scale': 100, 'units': 'm/s'},
        52: {'field_name': 'cadence256', 'field_type': 'uint16',
             'scale': 256, 'units': 'rpm'},
        53: {'field_name': 'fractional_cadence', 'field_type': 'uint8',
             'scale': 128, 'units': 'rpm'},
        54: {'field_name': 'total_hemoglobin_conc', 'field_type': 'uint16',
             'scale': 100, 'units': 'g/dL'},
        57: {'field_name': 'saturated_hemoglobin_percent',
             'field_type': 'uint16', 'scale': 10, 'units': '%'},
        62: {'field_name': 'device_index', 'field_type': 'device_index'},
        73: {'field_name': 'enhanced_speed', 'field_type': 'uint32',
             'scale': 1000, 'units': 'm/s'},
        78: {'field_name': 'enhanced_altitude', 'field_type': 'uint32',
             'scale': 5, 'offset': 500, 'units': 'm'}},
    'event': {
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'event', 'field_type': 'event'},
        1: {'field_name': 'event_type', 'field_type': 'event_type'},
        2: {'field_name': 'data16', 'field_type': 'uint16'},
        3: {'field_name': 'data', 'field_type': 'uint32'},
        4: {'field_name': 'event_group', 'field_type': 'uint8'},
        7: {'field_name': 'score', 'field_type': 'uint16'},
        8: {'field_name': 'opponent_score', 'field_type': 'uint16'},
        9: {'field_name': 'front_gear_num', 'field_type': 'uint8z'},
        10: {'field_name': 'front_gear', 'field_type': 'uint8z'},
        11: {'field_name': 'rear_gear_num', 'field_type': 'uint8z'},
        12: {'field_name': 'rear_gear', 'field_type': 'uint8z'},
        13: {'field_name': 'device_index', 'field_type': 'device_index'}},
    'device_info': {
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'device_index', 'field_type': 'device_index'},
        1: {'field_name': 'device_type', 'field_type': 'antplus_device_type'},
        2: {'field_name': 'manufacturer', 'field_type': 'manufacturer'},
        3: {'field_name': 'serial_number', 'field_type': 'uint32z'},
        4: {'field_name': 'product', 'field_type': 'uint16'},
        5: {'field_name': 'software_version', 'field_type': 'uint16',
            'scale': 100},
        6: {'field_name': 'hardware_version', 'field_type': 'uint8'},
        7: {'field_name': 'cum_operating_time', 'field_type': 'uint32',
            'units': 's'},
        10: {'field_name': 'battery_voltage', 'field_type': 'uint16',
             'scale': 256, 'units': 'V'},
        11: {'field_name': 'battery_status', 'field_type': 'battery_status'},
        18: {'field_name': 'sensor_position', 'field_type': 'body_location'},
        19: {'field_name': 'descriptor', 'field_type': 'string'},
        20: {'field_name': 'ant_transmission_type', 'field_type': 'uint8z'},
        21: {'field_name': 'ant_device_number', 'field_type': 'uint16z'},
        22: {'field_name': 'ant_network', 'field_type': 'ant_network'},
        25: {'field_name': 'source_type', 'field_type': 'source_type'},
        27: {'field_name': 'product_name', 'field_type': 'string'}},
    'workout': {
        4: {'field_name': 'sport', 'field_type': 'sport'},
        5: {'field_name': 'capabilities',
            'field_type': 'workout_capabilities'},
        6: {'field_name': 'num_valid_steps', 'field_type': 'uint16'},
        8: {'field_name': 'wkt_name', 'field_type': 'string'},
        11: {'field_name': 'sub_sport', 'field_type': 'sub_sport'},
        14: {'field_name': 'pool_length', 'field_type': 'uint16',
             'scale': 100, 'units': 'm'},
        15: {'field_name': 'pool_length_unit',
             'field_type': 'display_measure'}},
    'workout_step': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'wkt_step_name', 'field_type': 'string'},
        1: {'field_name': 'duration_type', 'field_type': 'wkt_step_duration'},
        2: {'field_name': 'duration_value', 'field_type': 'uint32'},
        3: {'field_name': 'target_type', 'field_type': 'wkt_step_target'},
        4: {'field_name': 'target_value', 'field_type': 'uint32'},
        5: {'field_name': 'custom_target_value_low', 'field_type': 'uint32'},
        6: {'field_name': 'custom_target_value_high',
            'field_type': 'uint32'},
        7: {'field_name': 'intensity', 'field_type': 'intensity'},
        8: {'field_name': 'notes', 'field_type': 'string'},
        9: {'field_name': 'equipment', 'field_type': 'workout_equipment'}},
    'schedule': {
        0: {'field_name': 'manufacturer', 'field_type': 'manufacturer'},
        1: {'field_name': 'product', 'field_type': 'uint16'},
        2: {'field_name': 'serial_number', 'field_type': 'uint32z'},
        3: {'field_name': 'time_created', 'field_type': 'date_time'},
        4: {'field_name': 'completed', 'field_type': 'bool'},
        5: {'field_name': 'type', 'field_type': 'schedule'},
        6: {'field_name': 'scheduled_time', 'field_type': 'local_date_time'}},
    'weight_scale': {
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'weight', 'field_type': 'weight', 'scale': 100,
            'units': 'kg'},
        1: {'field_name': 'percent_fat', 'field_type': 'uint16',
            'scale': 100, 'units': '%'},
        2: {'field_name': 'percent_hydration', 'field_type': 'uint16',
            'scale': 100, 'units': '%'},
        3: {'field_name': 'visceral_fat_mass', 'field_type': 'uint16',
            'scale': 100, 'units': 'kg'},
        4: {'field_name': 'bone_mass', 'field_type': 'uint16', 'scale': 100,
            'units': 'kg'},
        5: {'field_name': 'muscle_mass', 'field_type': 'uint16',
            'scale': 100, 'units': 'kg'},
        7: {'field_name': 'basal_met', 'field_type': 'uint16', 'scale': 4,
            'units': 'kcal/day'},
        8: {'field_name': 'physique_rating', 'field_type': 'uint8'},
        9: {'field_name': 'active_met', 'field_type': 'uint16', 'scale': 4,
            'units': 'kcal/day'},
        10: {'field_name': 'metabolic_age', 'field_type': 'uint8',
             'units': 'years'},
        11: {'field_name': 'visceral_fat_rating', 'field_type': 'uint8'},
        12: {'field_name': 'user_profile_index',
             'field_type': 'message_index'}},
    'course': {
        4: {'field_name': 'sport', 'field_type': 'sport'},
        5: {'field_name': 'name', 'field_type': 'string'},
        6: {'field_name': 'capabilities', 'field_type': 'course_capabilities'},
        7: {'field_name': 'sub_sport', 'field_type': 'sub_sport'}},
    'course_point': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        1: {'field_name': 'timestamp', 'field_type': 'date_time'},
        2: {'field_name': 'position_lat', 'field_type': 'int32',
            'units': 'semicircles'},
        3: {'field_name': 'position_long', 'field_type': 'int32',
            'units': 'semicircles'},
        4: {'field_name': 'distance', 'field_type': 'uint32', 'scale': 100,
            'units': 'm'},
        5: {'field_name': 'type', 'field_type': 'course_point'},
        6: {'field_name': 'name', 'field_type': 'string'},
        8: {'field_name': 'favorite', 'field_type': 'bool'}},
    'totals': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'timer_time', 'field_type': 'uint32',
            'units': 's'},
        1: {'field_name': 'distance', 'field_type': 'uint32', 'units': 'm'},
        2: {'field_name': 'calories', 'field_type': 'uint32',
            'units': 'kcal'},
        3: {'field_name': 'sport', 'field_type': 'sport'},
        4: {'field_name': 'elapsed_time', 'field_type': 'uint32',
            'units': 's'},
        5: {'field_name': 'sessions', 'field_type': 'uint16'},
        6: {'field_name': 'active_time', 'field_type': 'uint32',
            'units': 's'},
        9: {'field_name': 'sport_index', 'field_type': 'uint8'}},
    'activity': {
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'total_timer_time', 'field_type': 'uint32',
            'scale': 1000, 'units': 's'},
        1: {'field_name': 'num_sessions', 'field_type': 'uint16'},
        2: {'field_name': 'type', 'field_type': 'activity'},
        3: {'field_name': 'event', 'field_type': 'event'},
        4: {'field_name': 'event_type', 'field_type': 'event_type'},
        5: {'field_name': 'local_timestamp', 'field_type': 'local_date_time'},
        6: {'field_name': 'event_group', 'field_type': 'uint8'}},
    'software': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        3: {'field_name': 'version', 'field_type': 'uint16', 'scale': 100},
        5: {'field_name': 'part_number', 'field_type': 'string'}},
    'file_capabilities': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'type', 'field_type': 'file'},
        1: {'field_name': 'flags', 'field_type': 'file_flags'},
        2: {'field_name': 'directory', 'field_type': 'string'},
        3: {'field_name': 'max_count', 'field_type': 'uint16'},
        4: {'field_name': 'max_size', 'field_type': 'uint32',
            'units': 'bytes'}},
    'mesg_capabilities': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'file', 'field_type': 'file'},
        1: {'field_name': 'mesg_num', 'field_type': 'mesg_num'},
        2: {'field_name': 'count_type', 'field_type': 'mesg_count'},
        3: {'field_name': 'count', 'field_type': 'uint16'}},
    'field_capabilities': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'file', 'field_type': 'file'},
        1: {'field_name': 'mesg_num', 'field_type': 'mesg_num'},
        2: {'field_name': 'field_num', 'field_type': 'uint8'},
        3: {'field_name': 'count', 'field_type': 'uint16'}},
    'file_creator': {
        0: {'field_name': 'software_version', 'field_type': 'uint16'},
        1: {'field_name': 'hardware_version', 'field_type': 'uint8'}},
    'blood_pressure': {
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'systolic_pressure', 'field_type': 'uint16',
            'units': 'mmHg'},
        1: {'field_name': 'diastolic_pressure', 'field_type': 'uint16',
            'units': 'mmHg'},
        2: {'field_name': 'mean_arterial_pressure', 'field_type': 'uint16',
            'units': 'mmHg'},
        3: {'field_name': 'map_3_sample_mean', 'field_type': 'uint16',
            'units': 'mmHg'},
        4: {'field_name': 'map_morning_values', 'field_type': 'uint16',
            'units': 'mmHg'},
        5: {'field_name': 'map_evening_values', 'field_type': 'uint16',
            'units': 'mmHg'},
        6: {'field_name': 'heart_rate', 'field_type': 'uint8',
            'units': 'bpm'},
        7: {'field_name': 'heart_rate_type', 'field_type': 'hr_type'},
        8: {'field_name': 'status', 'field_type': 'bp_status'},
        9: {'field_name': 'user_profile_index',
            'field_type': 'message_index'}},
    'speed_zone': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'high_value', 'field_type': 'uint16',
            'scale': 1000, 'units': 'm/s'},
        1: {'field_name': 'name', 'field_type': 'string'}},
    'monitoring': {
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'device_index', 'field_type': 'device_index'},
        1: {'field_name': 'calories', 'field_type': 'uint16',
            'units': 'kcal', 'accumulate': True},
        2: {'field_name': 'distance', 'field_type': 'uint32', 'scale': 100,
            'units': 'm', 'accumulate': True},
        3: {'field_name': 'cycles', 'field_type': 'uint32', 'scale': 2,
            'units': 'cycles', 'accumulate': True},
        4: {'field_name': 'active_time', 'field_type': 'uint32',
            'scale': 1000, 'units': 's', 'accumulate': True},
        5: {'field_name': 'activity_type', 'field_type': 'activity_type'},
        6: {'field_name': 'activity_subtype', 'field_type': 'uint8'},
        7: {'field_name': 'activity_level', 'field_type': 'activity_level'},
        8: {'field_name': 'distance_16', 'field_type': 'uint16',
            'units': '100 * m'},
        9: {'field_name': 'cycles_16', 'field_type': 'uint16',
            'units': '2 * cycles (steps)'},
        10: {'field_name': 'active_time_16', 'field_type': 'uint16',
             'units': 's'},
        11: {'field_name': 'local_timestamp',
             'field_type': 'local_date_time'},
        12: {'field_name': 'temperature', 'field_type': 'int16',
             'scale': 100, 'units': 'C'},
        14: {'field_name': 'temperature_min', 'field_type': 'int16',
             'scale': 100, 'units': 'C'},
        15: {'field_name': 'temperature_max', 'field_type': 'int16',
             'scale': 100, 'units': 'C'},
        16: {'field_name': 'activity_time', 'field_type': 'uint16',
             'units': 'minutes'},
        19: {'field_name': 'active_calories', 'field_type': 'uint16',
             'units': 'kcal'},
        24: {'field_name': 'current_activity_type_intensity',
             'field_type': 'byte'},
        25: {'field_name': 'timestamp_min_8', 'field_type': 'uint8',
             'units': 'min'},
        26: {'field_name': 'timestamp_16', 'field_type': 'uint16',
             'units': 's'},
        27: {'field_name': 'heart_rate', 'field_type': 'uint8',
             'units': 'bpm'},
        28: {'field_name': 'intensity', 'field_type': 'uint8', 'scale': 10},
        29: {'field_name': 'duration_min', 'field_type': 'uint16',
             'units': 'min'},
        30: {'field_name': 'duration', 'field_type': 'uint32', 'units': 's'},
        31: {'field_name': 'ascent', 'field_type': 'uint32', 'scale': 1000,
             'units': 'm'},
        32: {'field_name': 'descent', 'field_type': 'uint32', 'scale': 1000,
             'units': 'm'},
        33: {'field_name': 'moderate_activity_minutes',
             'field_type': 'uint16', 'units': 'minutes'},
        34: {'field_name': 'vigorous_activity_minutes',
             'field_type': 'uint16', 'units': 'minutes'}},
    'hrv': {
        0: {'field_name': 'time', 'field_type': 'uint16', 'scale': 1000,
            'units': 's'}},
    'length': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'event', 'field_type': 'event'},
        1: {'field_name': 'event_type', 'field_type': 'event_type'},
        2: {'field_name': 'start_time', 'field_type': 'date_time'},
        3: {'field_name': 'total_elapsed_time', 'field_type': 'uint32',
            'scale': 1000, 'units': 's'},
        4: {'field_name': 'total_timer_time', 'field_type': 'uint32',
            'scale': 1000, 'units': 's'},
        5: {'field_name': 'total_strokes', 'field_type': 'uint16',
            'units': 'strokes'},
        6: {'field_name': 'avg_speed', 'field_type': 'uint16',
            'scale': 1000, 'units': 'm/s'},
        7: {'field_name': 'swim_stroke', 'field_type': 'swim_stroke'},
        9: {'field_name': 'avg_swimming_cadence', 'field_type': 'uint8',
            'units': 'strokes/min'},
        10: {'field_name': 'event_group', 'field_type': 'uint8'},
        11: {'field_name': 'total_calories', 'field_type': 'uint16',
             'units': 'kcal'},
        12: {'field_name': 'length_type', 'field_type': 'length_type'},
        18: {'field_name': 'player_score', 'field_type': 'uint16'},
        19: {'field_name': 'opponent_score', 'field_type': 'uint16'},
        20: {'field_name': 'stroke_count', 'field_type': 'uint16',
             'units': 'counts'},
        21: {'field_name': 'zone_count', 'field_type': 'uint16',
             'units': 'counts'}},
    'monitoring_info': {
        253: {'field_name': 'timestamp', 'field_type': 'date_time',
              'units': 's'},
        0: {'field_name': 'local_timestamp', 'field_type': 'local_date_time'},
        1: {'field_name': 'activity_type', 'field_type': 'activity_type'},
        3: {'field_name': 'cycles_to_distance', 'field_type': 'uint16',
            'scale': 5000, 'units': 'm/cycle'},
        4: {'field_name': 'cycles_to_calories', 'field_type': 'uint16',
            'scale': 5000, 'units': 'kcal/cycle'},
        5: {'field_name': 'resting_metabolic_rate', 'field_type': 'uint16',
            'units': 'kcal / day'}},
    'pad': {},
    'slave_device': {
        0: {'field_name': 'manufacturer', 'field_type': 'manufacturer'},
        1: {'field_name': 'product', 'field_type': 'uint16'}},
    'cadence_zone': {
        254: {'field_name': 'message_index', 'field_type': 'message_index'},
        0: {'field_name': 'high_value', 'field_type': 'uint8',
            'units': 'rpm'},
        1: {'field_name': 'name', 'field_type': 'string'}}}


def resolve_base_type(field_type):
    """The `BaseType` a profile field type is stored as on the wire."""
    try:
        return BASE_TYPES_BY_NAME[field_type]
    except KeyError:
        return BASE_TYPES_BY_NAME[TYPES[field_type]['base_type']]
